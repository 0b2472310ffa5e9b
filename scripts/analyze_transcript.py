"""Analyse a plain-text transcript file and print the extracted minutes as JSON."""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.extraction.analyzer import analyze_transcript, is_configured


def analyze_file(path: str, title: str | None, meeting_date: str) -> int:
    filepath = Path(path)
    if filepath.suffix.lower() != ".txt":
        print(f"ERROR {filepath.name}: expected a .txt transcript")
        return 1
    if not is_configured():
        print("ERROR ANTHROPIC_API_KEY is not set")
        return 1

    transcript = filepath.read_text(encoding="utf-8")
    extraction = analyze_transcript(title or filepath.stem, meeting_date, transcript)

    if extraction.parsed is None:
        print("Could not parse the model's answer; raw text follows.\n")
        print(extraction.raw_text)
        return 2

    print(json.dumps(extraction.parsed.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("file")
    parser.add_argument("--title", default=None)
    parser.add_argument("--date", default="", help="Meeting date, YYYY-MM-DD")
    args = parser.parse_args()
    sys.exit(analyze_file(args.file, args.title, args.date))
