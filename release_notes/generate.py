import logging
import os

import gitutil
import release_notes.model as rnm
import release_notes.output as rno
import release_notes.publish as rnp
import release_notes.render as rnr
import release_notes.tickets as rnt

logger = logging.getLogger(__name__)


def git_helper_for(cfg: rnm.ReleaseNotesCfg) -> gitutil.GitHelper:
    return gitutil.GitHelper(
        repo=cfg.repo_worktree,
        git_cfg=gitutil.GitCfg(
            user_name=cfg.git_user_name,
            user_email=cfg.git_user_email,
            remote_name=cfg.remote_name,
        ),
    )


def generate_release_notes(
    cfg: rnm.ReleaseNotesCfg,
    git_helper: gitutil.GitHelper | None=None,
) -> rnm.GenerationResult:
    '''
    renders release notes as configured by cfg, writes them to cfg.output_file, and (on a
    best-effort basis) commits and pushes them to cfg.release_branch.

    If cfg.template_file does not exist, nothing is done (in particular, git is not accessed).
    Any other error (in particular, invalid ticket-patterns, git-log-errors, template-errors, and
    io-errors) is raised. Errors whilst publishing are only reported as warnings.
    '''
    if not os.path.exists(cfg.template_file):
        logger.info(f'Template file not found: {cfg.template_file}')
        return rnm.GenerationResult(outcome=rnm.Outcome.SKIPPED)

    if not git_helper:
        git_helper = git_helper_for(cfg=cfg)

    tickets = rnt.extract_tickets(
        git_helper=git_helper,
        base_branch=cfg.base_branch,
        release_branch=cfg.release_branch,
        ticket_pattern=cfg.ticket_pattern,
    )

    context = rnr.build_context(
        release_version=cfg.release_version,
        tickets=tickets,
        template_data=cfg.template_data,
    )
    release_notes = rnr.render(
        template_source=rnr.load_template(cfg.template_file),
        context=context,
        engine=rnr.engine_for(cfg.template_file),
    )

    rno.write_output(
        output_file=cfg.output_file,
        content=release_notes,
    )
    logger.info(f'Release notes generated successfully: {cfg.output_file}')

    published = rnp.publish_release_notes(
        git_helper=git_helper,
        output_file=cfg.output_file,
        release_branch=cfg.release_branch,
        release_version=cfg.release_version,
        author_name=cfg.git_user_name,
        author_email=cfg.git_user_email,
    )

    return rnm.GenerationResult(
        outcome=rnm.Outcome.GENERATED,
        output_file=cfg.output_file,
        tickets=tickets,
        published=published,
    )
