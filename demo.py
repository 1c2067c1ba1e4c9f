#!/usr/bin/env python3
"""
wordbreak Demo - Shows break insertion on plain text and on a live page.

Run ``python demo.py`` for the text samples, or ``python demo.py serve`` to
start the demo page (requires uvicorn) and open
http://127.0.0.1:8000/?wordbreak=on&minchars=10
"""

import sys
from pathlib import Path

from wordbreak.examples.demo_app import SAMPLE_IDENTIFIERS, create_app
from wordbreak.examples.utils import SimpleConsoleLogger
from wordbreak.options.loader import load_options
from wordbreak.segmenters.wordbreak import WordBreakSegmenter

OPTIONS_FILE = Path(__file__).parent / "examples" / "options" / "wordbreak.yaml"


def show_samples(options):
    segmenter = WordBreakSegmenter(options)
    print(f"Minimum characters: {options.minimum_characters}")
    print("=" * 60)
    for text in SAMPLE_IDENTIFIERS:
        print(f"\n{text}")
        print(f"  -> {segmenter.process(text)}")


def serve(options):
    try:
        import uvicorn
    except ImportError:
        raise ImportError("Install uvicorn: pip install 'wordbreak[demo]'")

    uvicorn.run(create_app(options=options, logger=SimpleConsoleLogger()),
                host="127.0.0.1", port=8000)


def main():
    options = load_options(OPTIONS_FILE)
    if len(sys.argv) > 1 and sys.argv[1] == "serve":
        serve(options)
    else:
        show_samples(options)
    return 0


if __name__ == "__main__":
    sys.exit(main())
