import logging
import pathlib
from functools import wraps

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def takes_stream(i, mode):
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if (
                len(args) > i
                and args[i] is not None
                and isinstance(args[i], (str, pathlib.Path))
            ):
                with open(args[i], mode) as f:
                    return func(*args[:i], f, *args[i + 1 :], **kwargs)
            else:
                return func(*args, **kwargs)

        return wrapper

    return decorator


def serialize(sections):
    """
    Renders the sections as ini text, ie. for each section a
    [name] line, a key=value line per key sorted by key and a
    blank line.

    Keys and values are not escaped, so values containing '[', ']',
    '=' or whitespace do not survive being read back.
    """
    return "".join(str(section) for section in sections)


def encode(text):
    return text.encode(ENCODING, errors="surrogateescape")


@takes_stream(0, "wb")
def write_bytes(file_stream, data):
    file_stream.write(data)


def write(filelike, sections):
    """
    Writes the given sections to the file.
    :param filelike: A file-like object, (string to path, pathlib.Path
        or stream opened in binary mode).
    :param sections: Iterable of sections.

    The sections are encoded before the file is opened, so a file is
    left untouched when they cannot be encoded.
    """
    sections = list(sections)
    data = encode(serialize(sections))
    write_bytes(filelike, data)
    logger.debug(
        "wrote %d sections to %s",
        len(sections),
        getattr(filelike, "name", filelike),
    )
