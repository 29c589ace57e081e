from pathlib import Path


class Renderer:
    """
    A single PDF generation strategy

    Subclasses implement render() returning the PDF bytes for an application.
    min_size is the smallest output accepted before the dispatcher moves on
    to the next renderer; None means any output is accepted.
    """

    name = 'renderer'
    min_size = None

    def render(self, record):
        raise NotImplementedError

    def render_to_file(self, record, path):
        """Render and write the PDF to path, returning the written size"""
        pdf_bytes = self.render(record)

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(pdf_bytes)

        return path.stat().st_size

    def companion_paths(self, path):
        """Extra files this renderer writes next to the PDF at path"""
        return []

    def __repr__(self):
        return f"<{self.__class__.__name__} name={self.name!r} min_size={self.min_size!r}>"
