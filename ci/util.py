# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0


import os


class Failure(RuntimeError, ValueError):
    pass


def random_str(prefix=None, length=12):
    import random
    import string
    if prefix:
        length -= len(prefix)
    else:
        prefix = ''
    return prefix + ''.join(random.choice(string.ascii_lowercase) for _ in range(length))


def running_on_github_actions() -> bool:
    '''
    heuristically determines whether or not the caller is running inside a GitHub-Actions job
    (the runner always sets `GITHUB_ACTIONS=true`).
    '''
    return os.environ.get('GITHUB_ACTIONS') == 'true'
