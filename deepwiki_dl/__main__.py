# deepwiki_dl/__main__.py

from deepwiki_dl.cli import app

if __name__ == "__main__":
    app()
