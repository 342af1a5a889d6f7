import collections.abc
import dataclasses
import json
import logging

import dacite

import ci.gha
import ci.util
import release_notes.model as rnm

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Input:
    name: str
    required: bool = False
    help: str | None = None

    @property
    def attribute(self) -> str:
        return self.name.replace('-', '_')


INPUTS = (
    Input('template-file', required=True, help='path to release-notes template'),
    Input('output-file', required=True, help='path to write release notes to'),
    Input('release-version', required=True, help='exposed to template as `releaseVersion`'),
    Input('template-data', help='additional template-values (JSON object)'),
    Input('base-branch', help=f'defaults to {rnm.DEFAULT_BASE_BRANCH}'),
    Input('release-branch', required=True),
    Input('ticket-pattern', help=f'defaults to {rnm.DEFAULT_TICKET_PATTERN}'),
    Input('git-user-name', help=f'defaults to {rnm.DEFAULT_GIT_USER_NAME}'),
    Input('git-user-email', help=f'defaults to {rnm.DEFAULT_GIT_USER_EMAIL}'),
)


def parse_template_data(raw: str | None) -> dict:
    '''
    parses the given JSON object (absent or empty values are treated as `{}`)

    raises: ci.util.Failure if raw is not valid JSON, or does not contain a JSON object
    '''
    if not raw:
        raw = '{}'

    try:
        template_data = json.loads(raw)
    except json.JSONDecodeError as jde:
        raise ci.util.Failure(f'Invalid JSON in template-data input: {jde}') from jde

    if not isinstance(template_data, dict):
        raise ci.util.Failure(
            f'template-data input must be a JSON object, got: {type(template_data).__name__}'
        )

    logger.info('Successfully parsed template data JSON')
    return template_data


def read_raw_inputs(
    overrides: collections.abc.Mapping[str, str | None] | None=None,
) -> dict[str, str]:
    '''
    reads all known inputs, preferring non-empty values from `overrides` (keyed by attribute-name)
    over those passed by the CI-environment. Absent optional inputs are omitted from result.
    '''
    overrides = overrides or {}
    raw = {}

    for action_input in INPUTS:
        if not (value := overrides.get(action_input.attribute)):
            value = ci.gha.get_input(action_input.name, required=action_input.required)
        if value is None:
            continue
        raw[action_input.attribute] = value

    return raw


def read_cfg(
    overrides: collections.abc.Mapping[str, str | None] | None=None,
    repo_worktree: str | None=None,
) -> rnm.ReleaseNotesCfg:
    raw = read_raw_inputs(overrides=overrides)
    raw['template_data'] = parse_template_data(raw.get('template_data'))

    if repo_worktree:
        raw['repo_worktree'] = repo_worktree

    return dacite.from_dict(
        data_class=rnm.ReleaseNotesCfg,
        data=raw,
        config=dacite.Config(strict=True),
    )
