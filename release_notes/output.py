import logging
import os

logger = logging.getLogger(__name__)


def write_output(output_file: str, content: str):
    '''
    writes content to output_file (replacing existing contents), creating parent directories as
    needed
    '''
    if (output_dir := os.path.dirname(output_file)):
        os.makedirs(output_dir, exist_ok=True)

    with open(output_file, 'w', encoding='utf-8') as f:
        f.write(content)

    logger.debug(f'wrote {len(content)} chars to {output_file=}')
