"""Inspect the tags in an HTML or JATS sample and how bibmarkup maps them."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

import httpx
from bs4 import BeautifulSoup

from bibmarkup.html_parser import HTML_VOCABULARY
from bibmarkup.html_utils import TagVocabulary
from bibmarkup.jats_parser import JATS_VOCABULARY

_VOCABULARIES: dict[str, tuple[TagVocabulary, str]] = {
    "html": (HTML_VOCABULARY, "lxml"),
    "jats": (JATS_VOCABULARY, "html.parser"),
}


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect markup tags, attributes and unmapped elements.")
    parser.add_argument("--url", help="URL to fetch (e.g. a JATS record export)")
    parser.add_argument("--file", help="Local markup file path")
    parser.add_argument("--format", choices=sorted(_VOCABULARIES), default="jats", help="Markup dialect")
    args = parser.parse_args()

    if not args.url and not args.file:
        parser.error("Provide --url or --file")

    vocabulary, builder = _VOCABULARIES[args.format]
    markup = load_markup(url=args.url, file_path=args.file)
    soup = BeautifulSoup(markup, builder)
    tags, attrs = collect_stats(soup)

    print("Tags:")
    for name, count in tags.most_common():
        print(f"{name}: {count}")

    print("\nAttributes:")
    for name, count in attrs.most_common():
        print(f"{name}: {count}")

    print("\nTransparent (unmapped) tags:")
    for name in sorted(unmapped_tags(tags, vocabulary)):
        print(name)


def load_markup(*, url: str | None, file_path: str | None) -> str:
    if url:
        response = httpx.get(url, follow_redirects=True, timeout=15.0)
        response.raise_for_status()
        return response.text

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"Markup file not found: {path}")
    return path.read_text(encoding="utf-8")


def collect_stats(soup: BeautifulSoup) -> tuple[Counter, Counter]:
    tags = Counter()
    attrs = Counter()

    for tag in soup.find_all(True):
        tags[tag.name] += 1
        for attr in tag.attrs:
            attrs[attr] += 1
    return tags, attrs


def unmapped_tags(tags: Counter, vocabulary: TagVocabulary) -> set[str]:
    known = set(vocabulary.elements) | set(vocabulary.transparent) | {vocabulary.link_tag}
    return {name for name in tags if name not in known}


if __name__ == "__main__":
    main()
