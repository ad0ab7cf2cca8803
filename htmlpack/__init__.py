"""HtmlPack: bundle an HTML page and its local stylesheets/scripts into one file."""

__version__ = "0.1.0"
