import os

from textrank.util.log import create_logger

log = create_logger(__name__)

__FILE_THAT_EXISTS_AT_ROOT_PATH = 'textrank.yml.dist'


class TextRankRootPathException(Exception):
    pass


def textrank_root_path() -> str:
    """Return full path to the "textrank" package directory (the one with the configuration defaults)."""
    root_path = os.path.realpath(os.path.join(os.path.dirname(os.path.abspath(__file__)), ".."))

    if not os.path.isfile(os.path.join(root_path, __FILE_THAT_EXISTS_AT_ROOT_PATH)):
        raise TextRankRootPathException("Unable to determine TextRank root path (tried '%s')" % root_path)
    log.debug("Root path is %s" % root_path)
    return root_path


def languages_path() -> str:
    """Return full path to the directory with language modules and their data files."""
    return os.path.join(textrank_root_path(), 'languages')
