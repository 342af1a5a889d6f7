# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

'''
Thin wrapper around the interfaces GitHub-Actions offers to actions: inputs (passed as
`INPUT_<NAME>` env-vars), workflow-commands (`::warning::`, `::error::`) written to stdout, and the
files referenced by `GITHUB_OUTPUT` and `GITHUB_STEP_SUMMARY`.

Outside of GitHub-Actions, warnings and errors are only emitted via `logging`, and outputs and
summaries are silently dropped (helpful for local runs).
'''

import logging
import os
import sys

import ci.util

logger = logging.getLogger(__name__)


def input_env_name(name: str) -> str:
    return 'INPUT_' + name.replace(' ', '_').upper()


def get_input(
    name: str,
    required: bool=False,
) -> str | None:
    '''
    returns the (stripped) value of the action-input of the given name. Empty values are treated
    as absent.

    raises: ci.util.Failure if input is required, but was not passed
    '''
    value = os.environ.get(input_env_name(name), '').strip()
    if value:
        return value

    if required:
        raise ci.util.Failure(f'Input required and not supplied: {name}')

    return None


def escape_data(message: str) -> str:
    return message.replace('%', '%25').replace('\r', '%0D').replace('\n', '%0A')


def _workflow_command(command: str, message: str):
    sys.stdout.write(f'::{command}::{escape_data(message)}\n')
    sys.stdout.flush()


def warning(message: str):
    if ci.util.running_on_github_actions():
        _workflow_command('warning', message)
    else:
        logger.warning(message)


def set_failed(message: str):
    '''
    reports the given message as failure. It is up to caller to exit w/ a non-zero status.
    '''
    if ci.util.running_on_github_actions():
        _workflow_command('error', message)
    else:
        logger.error(message)


def set_output(name: str, value: str):
    if not (output_path := os.environ.get('GITHUB_OUTPUT')):
        logger.debug(f'not running in GHA context - ignoring output {name=}')
        return

    delimiter = ci.util.random_str(prefix='ghadelimiter_', length=32)
    if delimiter in value:
        raise ValueError(f'output-value for {name=} must not contain {delimiter=}')

    with open(output_path, 'a') as f:
        f.write(f'{name}<<{delimiter}\n{value}\n{delimiter}\n')


def write_to_summary(message: str):
    if not 'GITHUB_STEP_SUMMARY' in os.environ:
        return # not running in GHA context -> ignore

    with open(os.environ['GITHUB_STEP_SUMMARY'], 'a') as f:
        f.write(f'{message}\n')
