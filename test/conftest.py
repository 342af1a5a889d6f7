import git
import pytest

import release_notes.inputs as rni

BASE_COMMITS = ('fix bug PROJ-1', 'update docs')
RELEASE_COMMITS = ('PROJ-2: add feature', 'merge')


def commit(repo: git.Repo, *messages: str):
    for message in messages:
        repo.index.commit(message)
    return repo.head.commit


@pytest.fixture(autouse=True)
def clean_gha_env(monkeypatch):
    # tests might be run from within GitHub-Actions
    for name in ('GITHUB_ACTIONS', 'GITHUB_OUTPUT', 'GITHUB_STEP_SUMMARY'):
        monkeypatch.delenv(name, raising=False)
    for action_input in rni.INPUTS:
        monkeypatch.delenv(f'INPUT_{action_input.name.upper()}', raising=False)


@pytest.fixture
def origin_repo(tmp_path) -> git.Repo:
    return git.Repo.init(tmp_path / 'origin.git', bare=True)


@pytest.fixture
def git_repo(tmp_path) -> git.Repo:
    '''
    repository w/ branches `base` and `release` (checked out); `release` contains all commits from
    `base`, plus RELEASE_COMMITS. No remote is configured.
    '''
    repo = git.Repo.init(tmp_path / 'worktree')
    commit(repo, 'initial commit')

    base = repo.create_head('base')
    base.checkout()
    commit(repo, *BASE_COMMITS)

    release = repo.create_head('release')
    release.checkout()
    commit(repo, *RELEASE_COMMITS)

    return repo


@pytest.fixture
def git_repo_with_origin(git_repo, origin_repo) -> git.Repo:
    git_repo.create_remote('origin', origin_repo.git_dir)
    return git_repo
