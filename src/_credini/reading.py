import logging

from _credini.document import Document
from _credini.parser import parse
from _credini.tokenizer import tokenize
from _credini.writing import takes_stream

logger = logging.getLogger(__name__)


@takes_stream(0, "rb")
def read(file_stream):
    """
    Reads an ini file and returns its list of sections,
    ie. sections = read("/home/me/.aws/credentials")

    :param file_stream: A file-like object, (string to path, pathlib.Path
        or stream opened in binary mode).
    :raises MalformedSectionError: if a section header has no name.
    """
    sections = parse(tokenize(file_stream.read()))
    logger.debug(
        "read %d sections from %s",
        len(sections),
        getattr(file_stream, "name", file_stream),
    )
    return sections


def load(path):
    """
    Reads the ini file at path into a Document which remembers
    the path it was loaded from, see Document.dump.

    Errors from opening or reading the file are not caught.
    """
    return Document(read(path), path)
