import logging
import re

import gitutil

logger = logging.getLogger(__name__)


def find_tickets(
    text: str,
    pattern: str | re.Pattern,
) -> tuple[str, ...]:
    '''
    returns all (non-overlapping) matches of `pattern` in `text`, deduplicated, in order of their
    first occurrence. The whole match is returned, regardless of any groups defined by `pattern`.
    Empty matches are dropped.
    '''
    if isinstance(pattern, str):
        pattern = re.compile(pattern)

    # dicts retain insertion order
    tickets = dict.fromkeys(
        match.group(0) for match in pattern.finditer(text)
        if match.group(0)
    )
    return tuple(tickets)


def extract_tickets(
    git_helper: gitutil.GitHelper,
    base_branch: str,
    release_branch: str,
    ticket_pattern: str,
) -> tuple[str, ...]:
    '''
    extracts ticket-ids from subject-lines of commits contained in `release_branch`, but not in
    `base_branch`.

    raises re.error if ticket_pattern is not a valid regular expression
    '''
    pattern = re.compile(ticket_pattern)

    logger.info(
        f'Extracting tickets from commits in {release_branch} that are not in {base_branch}...'
    )
    subjects = git_helper.log_subjects(
        base_ref=base_branch,
        head_ref=release_branch,
    )
    logger.debug(f'{len(subjects)=}')

    tickets = find_tickets(
        text='\n'.join(subjects),
        pattern=pattern,
    )
    logger.info(f'Extracted {len(tickets)} unique ticket IDs')

    return tickets
