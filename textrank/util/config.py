import os

# noinspection PyPackageRequirements
import yaml

from textrank.util.log import create_logger
from textrank.util.paths import textrank_root_path

try:
    # noinspection PyPackageRequirements
    from yaml import CLoader as Loader
except ImportError:
    # noinspection PyPackageRequirements
    from yaml import Loader

log = create_logger(__name__)

# Environment variable with path to the custom configuration file
__CONFIG_FILE_ENV_VARIABLE = 'TEXTRANK_CONFIG'

__CONFIG = None


class TextRankConfigException(Exception):
    pass


def get_config() -> dict:
    """Get configuration dictionary.

    On first call, reads the file pointed to by TEXTRANK_CONFIG environment variable, or uses the static defaults if
    the variable is unset."""
    global __CONFIG

    if __CONFIG is not None:
        return __CONFIG

    config_file = os.environ.get(__CONFIG_FILE_ENV_VARIABLE, None)
    if config_file:
        set_config_file(config_file)
    else:
        set_config(dict())

    return __CONFIG


def __parse_yaml(config_file: str) -> dict:
    """Parse and return YAML file with configuration."""
    if not os.path.isfile(config_file):
        raise TextRankConfigException("Configuration file '%s' was not found." % config_file)

    with open(config_file, 'r', encoding='utf-8') as f:
        yaml_data = yaml.load(f.read(), Loader=Loader)

    if yaml_data is None:
        yaml_data = dict()

    if not isinstance(yaml_data, dict):
        raise TextRankConfigException("Configuration file '%s' is not a YAML mapping." % config_file)

    return yaml_data


def reset_config() -> None:
    """Forget the cached configuration; next get_config() reads it again."""
    global __CONFIG
    __CONFIG = None


def set_config_file(config_file: str) -> None:
    """Set the cached configuration dictionary from a file path."""
    if not os.path.isfile(config_file):
        raise TextRankConfigException("Configuration file '%s' was not found." % config_file)

    set_config(__parse_yaml(config_file))


def __merge_configs_internal(a: dict, b: dict, path=None) -> dict:
    """Merges b into a."""
    if path is None:
        path = []
    for key in b:
        if key in a:
            if isinstance(a[key], dict) and isinstance(b[key], dict):
                __merge_configs_internal(a[key], b[key], path + [str(key)])
            elif a[key] == b[key]:
                pass  # same leaf value
            else:
                log.debug(
                    "Overwriting '%(key)s' default value '%(default_value)s' with custom '%(custom_value)s" % {
                        'key': '.'.join(path + [str(key)]),
                        'default_value': a[key],
                        'custom_value': b[key]
                    })
                a[key] = b[key]
        else:
            a[key] = b[key]
    return a


def __merge_configs(config: dict, static_defaults: dict) -> dict:
    """Merge configs with precedence for the custom config."""

    merged_config = static_defaults.copy()
    merged_config = __merge_configs_internal(merged_config, config)

    return merged_config


def set_config(config: dict) -> None:
    """Set cached configuration dictionary (custom values merged over the static defaults)."""
    global __CONFIG

    if config is None:
        raise TextRankConfigException("Configuration is None.")

    if __CONFIG is not None:
        log.debug("config object already cached")

    static_defaults = __read_static_defaults()

    config = __merge_configs(config, static_defaults)

    __verify_settings(config)

    __CONFIG = config


def __read_static_defaults() -> dict:
    """Return configuration defaults dictionary."""
    defaults_file_yml = os.path.join(textrank_root_path(), "textrank.yml.dist")
    static_defaults = __parse_yaml(defaults_file_yml)
    return static_defaults


def __verify_settings(config: dict) -> None:
    """Verify configuration dictionary, print warnings or raise Exceptions if something's not right."""
    if 'languages' not in config or not isinstance(config['languages'], dict):
        raise TextRankConfigException("No languages configured")

    languages = config['languages']

    enabled = languages.get('enabled', None)
    if not isinstance(enabled, list):
        raise TextRankConfigException("'languages.enabled' should be a list of language codes")
    if len(enabled) == 0:
        log.warning("No languages are enabled")

    max_text_length = languages.get('max_text_length', None)
    if not isinstance(max_text_length, int) or max_text_length <= 0:
        raise TextRankConfigException("'languages.max_text_length' should be a positive integer")

    for language_code in enabled:
        if language_code not in languages or not isinstance(languages[language_code], dict):
            log.warning("Language '%s' is enabled but has no configuration section" % language_code)
