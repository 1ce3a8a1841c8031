#!/usr/bin/env python3
"""
Process a schema.org vocabulary into ordered type definitions with canonical
phrases, written as JSON.

Usage:
  ontophrase --white-list Restaurant,Hotel -o schemaorg.json
  ontophrase --cache-file schema.ttl --manual --wikidata-path labels.json \
      --white-list Person -o person.json
"""

import argparse
import json
import sys
from pathlib import Path

from rdflib.plugins.parsers.notation3 import BadSyntax

from .config import DEFAULT_CONFIG, setup_logging
from .config.tables import DEFAULT_CLASS_NAME, DEFAULT_VOCABULARY_URL
from .errors import OntologyError
from .loaders import load_label_source, load_vocabulary, statements_from_rdf
from .pipeline import OntologyProcessor
from .tagger import NltkTagger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ontophrase",
        description="Process a schema.org definition into typed classes with canonical phrases."
    )
    parser.add_argument("-o", "--output", required=True, help="Output JSON path, or - for stdout")
    parser.add_argument(
        "--cache-file", default="./schema.jsonld",
        help="Path to a cache file containing the schema.org definitions."
    )
    parser.add_argument(
        "--url", default=DEFAULT_VOCABULARY_URL,
        help="The schema.org URL to retrieve the definitions from."
    )
    parser.add_argument("--format", dest="rdf_format", help="RDF format of the cache file (guessed by default).")
    parser.add_argument("--manual", action="store_true", help="Enable manual annotations.")
    parser.add_argument("--wikidata-path", help="Path to the JSON file with wikidata property labels.")
    parser.add_argument(
        "--always-base-canonical", dest="always_base_canonical", action="store_true", default=True,
        help="Always generate a base canonical (default)."
    )
    parser.add_argument(
        "--no-always-base-canonical", dest="always_base_canonical", action="store_false",
        help="Do not always generate a base canonical."
    )
    parser.add_argument(
        "--class-name", default=DEFAULT_CLASS_NAME,
        help="The name of the generated class, this will also affect the entity names."
    )
    parser.add_argument(
        "--white-list", required=True,
        help="A list of queries allowed to use in the class, split by comma (no space)."
    )
    parser.add_argument("--keep-annotation", action="store_true", help="Keep vocabulary comments in the output.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING).")
    parser.add_argument("--log-file", help="Also write the log to this file.")
    return parser


def main_cli(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, Path(args.log_file) if args.log_file else None)

    labels_path = Path(args.wikidata_path) if args.wikidata_path else None
    if labels_path is not None and not labels_path.exists():
        print(f"Label file not found: {labels_path}", file=sys.stderr)
        sys.exit(1)

    try:
        labels = load_label_source(labels_path) if labels_path is not None else None
        config = DEFAULT_CONFIG.with_options(
            class_name=args.class_name,
            manual=args.manual,
            always_base_canonical=args.always_base_canonical,
            keep_annotation=args.keep_annotation,
            whitelist=tuple(args.white_list.split(",")),
            label_source=labels,
        )
        g = load_vocabulary(args.cache_file, url=args.url, rdf_format=args.rdf_format)
        statements = statements_from_rdf(g)
        class_def = OntologyProcessor(config, tagger=NltkTagger()).run(statements)
    except (OntologyError, ValueError, OSError, BadSyntax) as e:
        print(f"Failed to process vocabulary: {e}", file=sys.stderr)
        sys.exit(2)

    text = json.dumps(class_def.to_dict(), indent=2, ensure_ascii=False)
    if args.output == "-":
        print(text)
        return

    out_path = Path(args.output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text + "\n", encoding="utf-8")

    print(f"Types: {len(class_def.types)}", file=sys.stderr)
    print(f"Wrote: {out_path}", file=sys.stderr)


if __name__ == "__main__":
    main_cli()
