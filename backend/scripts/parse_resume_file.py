"""
Parse a local resume file and print the extracted profile as JSON
"""
import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from resume_parser.core.config import settings
from resume_parser.core.exceptions import DecodeError
from resume_parser.core.logging_config import configure_logging
from resume_parser.resumes.parser import ResumeParser
from resume_parser.resumes.text_extractor import DOC_MIME_TYPE, DOCX_MIME_TYPE, PDF_MIME_TYPE, decode

EXTENSION_MIME_TYPES = {
    ".pdf": PDF_MIME_TYPE,
    ".docx": DOCX_MIME_TYPE,
    ".doc": DOC_MIME_TYPE,
}


def parse_file(file_path: Path) -> dict:
    """Decode and parse one file"""
    mime_type = EXTENSION_MIME_TYPES.get(file_path.suffix.lower())
    raw_text = decode(file_path.read_bytes(), mime_type)
    parser = ResumeParser(max_chars=settings.MAX_PARSE_CHARS)
    return parser.parse(raw_text).model_dump(by_alias=True)


def main() -> int:
    arg_parser = argparse.ArgumentParser(description=__doc__)
    arg_parser.add_argument("file", type=Path, help="PDF, DOCX or plain-text resume")
    arg_parser.add_argument("--log-level", default="WARNING")
    args = arg_parser.parse_args()

    configure_logging(level=args.log_level)

    if not args.file.exists():
        print(f"❌ File not found: {args.file}", file=sys.stderr)
        return 1

    try:
        result = parse_file(args.file)
    except DecodeError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
