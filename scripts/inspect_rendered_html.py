"""Render Markdown with mdblocks and inspect the resulting HTML structure."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

import httpx
from bs4 import BeautifulSoup

from mdblocks import MarkdownParser


def main() -> None:
    parser = argparse.ArgumentParser(description="Render Markdown and count HTML tags and attributes.")
    parser.add_argument("--url", help="URL of a raw Markdown file to fetch")
    parser.add_argument("--file", help="Local Markdown file path")
    parser.add_argument("--plain", action="store_true", help="Also print the plain-text rendering")
    args = parser.parse_args()

    if not args.url and not args.file:
        parser.error("Provide --url or --file")

    markdown = load_markdown(url=args.url, file_path=args.file)
    document = MarkdownParser().parse(markdown)
    soup = BeautifulSoup(document.html(), "lxml")
    tags, attrs = collect_stats(soup)

    print(f"Title: {document.title or '-'}")
    print(f"Fragments: {len(document.fragments)}")

    print("\nTags:")
    for name, count in tags.most_common():
        print(f"{name}: {count}")

    print("\nAttributes:")
    for name, count in attrs.most_common():
        print(f"{name}: {count}")

    if args.plain:
        print("\nPlain text:")
        print(document.plain_text())


def load_markdown(*, url: str | None, file_path: str | None) -> str:
    if url:
        response = httpx.get(url, follow_redirects=True, timeout=15.0)
        response.raise_for_status()
        return response.text

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"Markdown file not found: {path}")
    return path.read_text(encoding="utf-8")


def collect_stats(soup: BeautifulSoup) -> tuple[Counter, Counter]:
    tags = Counter()
    attrs = Counter()

    for tag in soup.find_all(True):
        if tag.name in {"html", "body"}:
            continue
        tags[tag.name] += 1
        for attr, value in tag.attrs.items():
            attrs[f"{attr}={value}"] += 1
    return tags, attrs


if __name__ == "__main__":
    main()
