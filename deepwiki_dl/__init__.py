# deepwiki_dl/__init__.py

"""
Download a DeepWiki wiki and split it into one markdown file per page.
"""

__version__ = "1.0.0"
