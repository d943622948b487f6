import bs4
import re
import warnings


_short_id_re = re.compile('[a-z0-9]+')


def short_ids(xml):
    """Extract the LDML short time zone IDs from CLDR's timezone.xml.

    Returns (short ID, canonical zone) pairs in document order.
    Metazones, deprecated IDs and the "unk" placeholder are skipped;
    the canonical zone is the first of the listed aliases."""
    with warnings.catch_warnings():
        # timezone.xml is simple enough for the HTML parser
        warnings.simplefilter('ignore', bs4.XMLParsedAsHTMLWarning)
        soup = bs4.BeautifulSoup(xml, 'html.parser')
    pairs = []
    for element in soup.find_all('type'):
        name = element.get('name')
        description = element.get('description')
        alias = element.get('alias')
        if name is None or description is None or alias is None:
            continue
        if not _short_id_re.fullmatch(name):
            continue
        if description == 'Metazone' or element.get('deprecated') == 'true' or name == 'unk':
            continue
        pairs.append((name, alias.split(' ')[0]))
    return pairs
