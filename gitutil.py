# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0


import dataclasses
import logging

import git
import git.remote

logger = logging.getLogger(__name__)


@dataclasses.dataclass(kw_only=True)
class GitCfg:
    '''
    Configuration for interacting w/ a git-repository. If user_name and user_email are set, they
    are used transiently for commits (i.e. neither .git/config nor global git-config is altered).
    Otherwise, the effective git-config is expected to contain an adequate identity.

    remote_name: name of the (already configured) remote to push to
    '''
    user_name: str | None = None
    user_email: str | None = None
    remote_name: str = 'origin'


class GitHelper:
    def __init__(
        self,
        repo,
        git_cfg: GitCfg,
    ):
        if repo is None:
            raise ValueError(repo)
        if isinstance(repo, str):
            repo = git.Repo(repo)
        if not isinstance(repo, git.Repo):
            raise ValueError(repo)

        self.repo = repo
        self.git_cfg = git_cfg

    def _actor(self) -> git.Actor | None:
        if not (git_cfg := self.git_cfg):
            return None

        if (user := git_cfg.user_name) and (email := git_cfg.user_email):
            return git.Actor(user, email)

        return None

    def _identity_env(self, actor: git.Actor | None) -> dict[str, str]:
        cmd_env = {}
        if not actor:
            return cmd_env

        if (user := actor.name):
            cmd_env['GIT_AUTHOR_NAME'] = user
            cmd_env['GIT_COMMITTER_NAME'] = user
        if (email := actor.email):
            cmd_env['GIT_AUTHOR_EMAIL'] = email
            cmd_env['GIT_COMMITTER_EMAIL'] = email

        return cmd_env

    def log_subjects(self, base_ref: str, head_ref: str) -> list[str]:
        '''
        returns the subject-lines of all commits reachable from `head_ref`, but not from
        `base_ref` (`git log base_ref..head_ref`), newest first.
        '''
        rev_range = f'{base_ref}..{head_ref}'
        logger.info(f'Executing: git log {rev_range} --pretty=format:%s')

        output = self.repo.git.log(rev_range, '--pretty=format:%s')
        return output.splitlines()

    def add(self, *paths: str):
        self.repo.git.add('--', *paths)

    def commit(self, message: str, actor: git.Actor | None=None) -> git.Commit:
        '''
        commits the current index (`git commit`), updating the current branch. Author and
        committer are set from `actor` (falling back to git_cfg) for this commit only.

        raises git.exc.GitCommandError if there is nothing to commit
        '''
        cmd_env = self._identity_env(actor=actor or self._actor())

        with self.repo.git.custom_environment(**cmd_env):
            self.repo.git.commit('--message', message)

        return self.repo.head.commit

    def push(self, ref: str):
        remote = self.repo.remote(self.git_cfg.remote_name)

        results = remote.push(ref)
        if not results:
            return # according to remote.push's documentation, empty results indicate
            # an error. however, the documentation seems to be wrong
        if len(results) > 1:
            raise NotImplementedError('more than one result (do not know how to handle')

        push_info: git.remote.PushInfo = results[0]
        failed_flags = (
            push_info.ERROR
            | push_info.REJECTED
            | push_info.REMOTE_REJECTED
            | push_info.REMOTE_FAILURE
        )
        if push_info.flags & failed_flags:
            raise RuntimeError(f'git-push failed: {push_info.summary.strip()}')

        logger.debug(f'pushed {ref=} to {remote.name=}')
