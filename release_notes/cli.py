#! /usr/bin/env python3
import argparse
import json
import logging
import os
import sys

import ci.gha
import ci.log
import release_notes.generate as rng
import release_notes.inputs as rni
import release_notes.model as rnm

logger = logging.getLogger('release-notes-from-tickets')


def parse_args(argv=None) -> argparse.Namespace:
    ''' Parses CLI for release-notes generation. Absent arguments are read from action-inputs '''
    parser = argparse.ArgumentParser(
        description='Render release notes from tickets referenced by commits of a release-branch',
    )
    for action_input in rni.INPUTS:
        parser.add_argument(
            f'--{action_input.name}',
            dest=action_input.attribute,
            default=None,
            help=action_input.help,
        )
    parser.add_argument(
        '--repo-worktree',
        default=os.getcwd(),
        help='path to git-repository\'s worktree root (defaults to cwd)',
    )

    return parser.parse_args(argv)


def report_result(result: rnm.GenerationResult):
    if result.outcome is not rnm.Outcome.GENERATED:
        return

    ci.gha.set_output('output-file', result.output_file)
    ci.gha.set_output('tickets', json.dumps(list(result.tickets)))
    ci.gha.set_output('published', json.dumps(result.published))

    tickets = ', '.join(result.tickets) or '(none)'
    ci.gha.write_to_summary(
        f'Generated release notes `{result.output_file}` (tickets: {tickets})'
    )


def main(argv=None) -> int:
    ci.log.configure_default_logging()
    parsed = parse_args(argv)

    try:
        cfg = rni.read_cfg(
            overrides=vars(parsed),
            repo_worktree=parsed.repo_worktree,
        )
        result = rng.generate_release_notes(cfg=cfg)
    except Exception as e:
        logger.debug('generation failed', exc_info=True)
        ci.gha.set_failed(f'Action failed with error: {e}')
        return 1

    report_result(result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
