import logging
import os

import git

import ci.gha
import gitutil
import release_notes.model as rnm

logger = logging.getLogger(__name__)


def publish_release_notes(
    git_helper: gitutil.GitHelper,
    output_file: str,
    release_branch: str,
    release_version: str,
    author_name: str | None=None,
    author_email: str | None=None,
) -> bool:
    '''
    commits output_file (as the only change) and pushes release_branch to the configured remote.
    If passed, author_name and author_email are used as author and committer for the created
    commit (falling back to git_helper's git_cfg).

    Failures are reported as warnings (and not raised).

    returns: whether or not release notes were committed and pushed successfully
    '''
    if author_name and author_email:
        actor = git.Actor(author_name, author_email)
    else:
        actor = None

    try:
        git_helper.add(os.path.abspath(output_file))
        commit = git_helper.commit(
            message=rnm.commit_message(release_version),
            actor=actor,
        )
        logger.info(f'created commit {commit.hexsha}')
        git_helper.push(ref=release_branch)
    except Exception as e:
        ci.gha.warning(f'Failed to commit/push changes: {e}')
        return False

    logger.info(f'Successfully committed and pushed release notes to {release_branch}')
    return True
