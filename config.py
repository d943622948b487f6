import sys
from typing import Any
import yaml


DEFAULTS = {
    'SINCE': 'XX',
    'KNOWN_IDENTIFIERS': {},
}

settings: dict[str, Any] = {}


class ConfigError(ValueError):
    pass


def load(path: str = 'config.yaml', silent: bool = True) -> bool:
    """Load settings from a YAML file.

    Only upper-case keys are taken over. Settings of an earlier load
    are discarded, even if the file turns out to be missing or invalid.
    Returns False if the file does not exist and silent is set."""
    settings.clear()
    try:
        with open(path, encoding='utf-8') as f:
            loaded = yaml.safe_load(f)
    except FileNotFoundError:
        if silent:
            return False
        raise ConfigError('%s not found' % path)
    except yaml.YAMLError as error:
        raise ConfigError('%s is not valid YAML: %s' % (path, error)) from error
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ConfigError('%s must contain a mapping' % path)
    known = loaded.get('KNOWN_IDENTIFIERS', {})
    if not isinstance(known, dict) or not all(isinstance(names, list) for names in known.values()):
        raise ConfigError('KNOWN_IDENTIFIERS must map property kinds to lists of identifiers')
    for key, value in loaded.items():
        if isinstance(key, str) and key.isupper():
            settings[key] = value
    return True


def get(key: str) -> Any:
    return settings.get(key, DEFAULTS.get(key))


def known_identifiers(kind: str) -> list[str]:
    """Identifiers the target platform already defines for a property kind."""
    return [str(name) for name in (get('KNOWN_IDENTIFIERS').get(kind) or [])]


def read_known_file(path: str) -> list[str]:
    """Read identifiers from a plain file, one per line.

    Blank lines and # comments are ignored."""
    names = []
    with open(path, encoding='utf-8') as f:
        for line in f:
            line = line.split('#', 1)[0].strip()
            if line:
                names.append(line)
    return names


def log(type: str, message: str) -> None:
    if settings.get('DEBUG_' + type, False):
        print('[%s] %s' % (type, message), file=sys.stderr)
