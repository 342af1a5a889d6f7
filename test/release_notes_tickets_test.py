import re

import pytest

import gitutil
import release_notes.model as rnm
import release_notes.tickets as examinee


@pytest.fixture
def git_helper(git_repo):
    return gitutil.GitHelper(
        repo=git_repo,
        git_cfg=gitutil.GitCfg(),
    )


def test_find_tickets_deduplicates_retaining_order():
    text = '\n'.join((
        'PROJ-3: first',
        'fix PROJ-1 and OTHER-7',
        'revert PROJ-3',
        'PROJ-1 again',
    ))

    tickets = examinee.find_tickets(text, rnm.DEFAULT_TICKET_PATTERN)

    assert tickets == ('PROJ-3', 'PROJ-1', 'OTHER-7')
    assert len(set(tickets)) == len(tickets)


def test_find_tickets_without_matches():
    assert examinee.find_tickets('update docs\nmerge', rnm.DEFAULT_TICKET_PATTERN) == ()
    assert examinee.find_tickets('', rnm.DEFAULT_TICKET_PATTERN) == ()


def test_find_tickets_returns_whole_match():
    # groups must not change result
    pattern = re.compile(r'(PROJ|OPS)-(\d+)')

    assert examinee.find_tickets('OPS-1, PROJ-22', pattern) == ('OPS-1', 'PROJ-22')


def test_find_tickets_drops_empty_matches():
    assert examinee.find_tickets('abc A-1', r'[A-Z]*-?[0-9]*') == ('A-1',)


def test_find_tickets_is_case_sensitive():
    assert examinee.find_tickets('proj-1 PROJ-1', rnm.DEFAULT_TICKET_PATTERN) == ('PROJ-1',)


def test_extract_tickets(git_helper):
    tickets = examinee.extract_tickets(
        git_helper=git_helper,
        base_branch='base',
        release_branch='release',
        ticket_pattern=rnm.DEFAULT_TICKET_PATTERN,
    )

    # PROJ-1 is contained in base-branch
    assert tickets == ('PROJ-2',)


def test_extract_tickets_empty_range(git_helper):
    tickets = examinee.extract_tickets(
        git_helper=git_helper,
        base_branch='release',
        release_branch='release',
        ticket_pattern=rnm.DEFAULT_TICKET_PATTERN,
    )

    assert tickets == ()


def test_extract_tickets_invalid_pattern(git_helper):
    with pytest.raises(re.error):
        examinee.extract_tickets(
            git_helper=git_helper,
            base_branch='base',
            release_branch='release',
            ticket_pattern='[A-Z+-(',
        )
