import os
import requests
from typing import Optional

import config


user_agent = 'unicodetables ' + requests.utils.default_user_agent()


def is_url(source: str) -> bool:
    return source.startswith(('http://', 'https://'))


def read_lines(source: str, filename: Optional[str] = None) -> list[str]:
    """Read the lines of a data file.

    The source may be an HTTP(S) URL, a file, or a directory
    (such as a copy of the Unicode Character Database) that
    contains a file with the given name. A URL ending in a slash
    is treated like a directory as well."""
    if is_url(source):
        if source.endswith('/') and filename:
            source += filename
        config.log('SOURCE', 'fetching %s' % source)
        response = requests.get(source, headers={'User-Agent': user_agent}, timeout=60)
        response.raise_for_status()
        response.encoding = 'utf-8'
        return response.text.splitlines()
    if os.path.isdir(source):
        if not filename:
            raise IsADirectoryError('%s is a directory' % source)
        source = os.path.join(source, filename)
    config.log('SOURCE', 'reading %s' % source)
    with open(source, encoding='utf-8') as f:
        return f.read().splitlines()
