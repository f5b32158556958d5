"""
File Extractor Service - Split a model response into named website files

Fenced segments are resolved to filenames by an ordered chain of rules:
inline filename hint, then tag/content inference, then generated fallback
names. An earlier rule's answer is never overridden by a later one.
"""

from __future__ import annotations

import re

from models.files import CodeSegment, ExtractedFile, ResolutionSource

FENCE_PATTERN = re.compile(r"```(?:([A-Za-z0-9_]+)\s*\n)?([\s\S]*?)```")

# Tried in order; each one is searched across the whole hint window
HINT_PATTERNS = [
    re.compile(r"<!--\s*([A-Za-z0-9_\-.]+(?:\.[A-Za-z0-9_]+))\s*-->"),
    re.compile(r"//\s*([A-Za-z0-9_\-.]+(?:\.[A-Za-z0-9_]+))"),
    re.compile(r"/\*\s*([A-Za-z0-9_\-.]+(?:\.[A-Za-z0-9_]+))\s*\*/"),
    re.compile(r"#\s*([A-Za-z0-9_\-.]+(?:\.[A-Za-z0-9_]+))"),
]
HINT_WINDOW_LINES = 3

# Whitespace plus the byte-order mark, which str.strip() keeps
EDGE_WHITESPACE = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")

# (filename, tags, content patterns); first matching entry wins
INFERENCE_RULES = [
    (
        "index.html",
        ("html",),
        [re.compile(r"<!doctype html", re.IGNORECASE), re.compile(r"<html", re.IGNORECASE)],
    ),
    (
        "style.css",
        ("css",),
        [re.compile(r"(^|\s)body\s*\{"), re.compile(r"\.[A-Za-z0-9_-]+\s*\{")],
    ),
    (
        "script.js",
        ("js", "javascript"),
        [re.compile(r"document\.|window\.|addEventListener")],
    ),
]


def find_file_hint(code: str) -> str | None:
    """Return a filename named in a comment within the first three lines"""
    window = "\n".join(re.split(r"\r?\n", code)[:HINT_WINDOW_LINES])
    for pattern in HINT_PATTERNS:
        match = pattern.search(window)
        if match:
            return match.group(1)
    return None


def extract_code_segments(text: str) -> list[CodeSegment]:
    """Extract fenced code segments in order of appearance"""
    segments = []
    for match in FENCE_PATTERN.finditer(text):
        language = (match.group(1) or "").lower()
        code = EDGE_WHITESPACE.sub("", match.group(2))
        segments.append(
            CodeSegment(
                language=language,
                code=code,
                file_hint=find_file_hint(code),
            )
        )
    return segments


def infer_filename(language: str, code: str) -> tuple[str, ResolutionSource] | None:
    """Map a segment to index.html / style.css / script.js by tag or content"""
    for filename, tags, patterns in INFERENCE_RULES:
        if language in tags:
            return filename, ResolutionSource.TAG
        if any(pattern.search(code) for pattern in patterns):
            return filename, ResolutionSource.CONTENT
    return None


def fallback_extension(language: str) -> str:
    if language == "css":
        return ".css"
    if language == "html":
        return ".html"
    if language.startswith("js"):
        return ".js"
    return ".txt"


def fallback_filename(language: str, taken) -> str:
    """First of file1.ext, file2.ext, ... not already in ``taken``"""
    ext = fallback_extension(language)
    index = 1
    filename = f"file{index}{ext}"
    while filename in taken:
        index += 1
        filename = f"file{index}{ext}"
    return filename


def resolve_files(text: str) -> list[ExtractedFile]:
    """Resolve every fenced segment to a filename, recording the deciding rule"""
    resolved: list[ExtractedFile] = []
    taken: set[str] = set()

    for segment in extract_code_segments(text):
        if segment.file_hint:
            filename, source = segment.file_hint, ResolutionSource.HINT
        else:
            inferred = infer_filename(segment.language, segment.code)
            if inferred:
                filename, source = inferred
            else:
                filename = fallback_filename(segment.language, taken)
                source = ResolutionSource.FALLBACK

        taken.add(filename)
        resolved.append(
            ExtractedFile(
                filename=filename,
                content=segment.code,
                language=segment.language,
                source=source,
            )
        )

    return resolved


def build_file_map(resolved: list[ExtractedFile]) -> dict[str, str]:
    """Filename -> content; first-occurrence order, last content wins"""
    files: dict[str, str] = {}
    for item in resolved:
        files[item.filename] = item.content
    return files


def extract_files_from_response(text: str) -> dict[str, str]:
    """Split a model response into a filename -> content mapping"""
    return build_file_map(resolve_files(text))
