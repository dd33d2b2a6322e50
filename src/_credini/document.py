from _credini.writing import write


class Document:
    """
    The sections of an ini file, in the order they appear, along
    with the path of the file.

    Sections are looked up by name, the first section with a
    given name wins. The sections are owned by the document, changes
    made to their keys are written by dump().

    A document is not meant to be shared between threads.
    """

    def __init__(self, sections=None, path=None):
        self.sections = list(sections) if sections is not None else []
        self.path = path

    def names(self):
        return [section.name for section in self.sections]

    def get(self, name, default=None):
        for section in self.sections:
            if section.name == name:
                return section
        return default

    def __getitem__(self, name):
        section = self.get(name)
        if section is None:
            raise KeyError(name)
        return section

    def __contains__(self, name):
        return self.get(name) is not None

    def __iter__(self):
        return iter(self.sections)

    def __len__(self):
        return len(self.sections)

    def __eq__(self, other):
        if not isinstance(other, Document):
            return NotImplemented
        return self.sections == other.sections

    def __repr__(self):
        return f"Document({self.sections!r}, {self.path!r})"

    def dump(self, path=None):
        """
        Writes the document to path, defaults to the path it was
        loaded from.
        """
        path = path if path is not None else self.path
        if path is None:
            raise ValueError("Document has no path to be written to")
        write(path, self.sections)


def save(document, path=None):
    """
    Writes the document to path, or to document.path if not given.
    """
    document.dump(path)
