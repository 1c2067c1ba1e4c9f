"""
wordbreak - Soft word-break insertion for long identifiers in HTML responses.

Long dotted or camel-cased tokens (namespaced identifiers, file names) get
break markers such as ``<wbr>`` so browsers can wrap them instead of letting
them overflow their container.
"""

__version__ = "0.1.0"
