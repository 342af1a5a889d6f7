import dataclasses
import enum
import os


DEFAULT_BASE_BRANCH = 'master'
DEFAULT_TICKET_PATTERN = r'[A-Z]+-[0-9]+'
DEFAULT_GIT_USER_NAME = 'GitHub Action'
DEFAULT_GIT_USER_EMAIL = 'action@github.com'
DEFAULT_REMOTE_NAME = 'origin'

# names of template-context-entries that must not be overwritten by template-data
RELEASE_VERSION_KEY = 'releaseVersion'
TICKETS_KEY = 'tickets'


@dataclasses.dataclass(frozen=True, kw_only=True)
class ReleaseNotesCfg:
    '''
    template_file: path to template to render (templates w/ `.mako` suffix are rendered w/ mako,
                   all others w/ jinja2)
    output_file: path to write rendered release notes to (parent-dirs are created as needed)
    release_version: exposed to template as `releaseVersion`
    release_branch: branch to read commits from, and to push release notes to
    base_branch: commits reachable from this branch are ignored
    ticket_pattern: regular expression matching a single ticket-id
    template_data: additional values exposed to template
    repo_worktree: path to the git-repository's worktree
    '''
    template_file: str
    output_file: str
    release_version: str
    release_branch: str
    base_branch: str = DEFAULT_BASE_BRANCH
    ticket_pattern: str = DEFAULT_TICKET_PATTERN
    git_user_name: str = DEFAULT_GIT_USER_NAME
    git_user_email: str = DEFAULT_GIT_USER_EMAIL
    template_data: dict = dataclasses.field(default_factory=dict)
    repo_worktree: str = dataclasses.field(default_factory=os.getcwd)
    remote_name: str = DEFAULT_REMOTE_NAME


class Outcome(enum.StrEnum):
    SKIPPED = 'skipped'
    GENERATED = 'generated'


@dataclasses.dataclass(frozen=True)
class GenerationResult:
    outcome: Outcome
    output_file: str | None = None
    tickets: tuple[str, ...] = ()
    published: bool = False


def commit_message(release_version: str) -> str:
    return f'Add release notes for {release_version}'
