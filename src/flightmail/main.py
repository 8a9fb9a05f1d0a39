"""
# src/flightmail/main.py
# Command line entry point: parse stored emails and save the results
"""

import argparse
from functools import partial
from typing import Dict, List, Optional

from dotenv import load_dotenv
from tqdm import tqdm

from .config import load_llm_settings
from .llm.extractor import parse_with_model
from .parsers.flight_parser import format_flight_details, parse_email
from .records import build_flight_record
from .storage.email_storage import EmailStorage, EmailStorageError

DEFAULT_OUTPUT = 'data/processed/flights.json'


def process_emails(emails: List[Dict], model_fallback=None, as_records: bool = False,
                   verbose: bool = True) -> List[Dict]:
    """
    Run every email through the parsing pipeline

    Args:
        emails: Stored email dicts with 'from', 'subject' and 'body'
        model_fallback: Callable used when the heuristic parsers give up
        as_records: Build storable trip records instead of raw results
        verbose: Print each result as it is produced

    Returns:
        One dictionary per email, in input order
    """
    output = []
    for email in tqdm(emails, desc="Parsing emails", disable=not verbose):
        subject = email.get('subject', '') or ''
        result = parse_email(email, model_fallback=model_fallback)

        if verbose:
            tqdm.write(f"\nEmail: {subject}")
            tqdm.write("-" * 40)
            tqdm.write(format_flight_details(result))

        if as_records:
            output.append(build_flight_record(result, subject))
        else:
            item = result.to_dict()
            item['subject'] = subject
            output.append(item)
    return output


def main(argv: Optional[List[str]] = None):
    load_dotenv()
    parser = argparse.ArgumentParser(description='Extract flight itineraries from stored emails')
    parser.add_argument('--input', type=str, required=True,
                        help='JSON file of stored emails ({"emails": [...]} or a list)')
    parser.add_argument('--output', type=str, default=DEFAULT_OUTPUT,
                        help=f'Where to write the results (default: {DEFAULT_OUTPUT})')
    parser.add_argument('--storage-dir', type=str, default='data/raw_emails',
                        help='Directory relative input paths are resolved against')
    parser.add_argument('--no-llm', action='store_true',
                        help='Never call the model fallback')
    parser.add_argument('--llm-model', type=str, default=None,
                        help='Model used by the fallback (default: env FLIGHTMAIL_LLM_MODEL)')
    parser.add_argument('--llm-max-body-chars', type=int, default=None,
                        help='Max email body chars sent to the model')
    parser.add_argument('--records', action='store_true',
                        help='Write storable trip records instead of parse results')
    parser.add_argument('--quiet', action='store_true',
                        help='Do not print each result')
    args = parser.parse_args(argv)

    settings = load_llm_settings(use_dotenv=False)
    if args.no_llm:
        settings.enabled = False
    if args.llm_model:
        settings.model = args.llm_model
    if args.llm_max_body_chars is not None:
        settings.max_body_chars = args.llm_max_body_chars
    if settings.enabled and not settings.api_key:
        print("OPENAI_API_KEY is not set. Model fallback will be unavailable.")

    storage = EmailStorage(args.storage_dir)
    try:
        emails = storage.load_emails(args.input)
    except EmailStorageError as exc:
        print(f"Error: {exc}")
        return 1

    if not emails:
        print(f"No emails found in {args.input}")
        return 0

    print(f"\nProcessing {len(emails)} emails...")
    model_fallback = partial(parse_with_model, settings=settings)
    results = process_emails(emails, model_fallback=model_fallback,
                             as_records=args.records, verbose=not args.quiet)

    saved_path = storage.save_results(results, args.output, email_count=len(emails))
    parsed = sum(1 for item in results if item.get('success', item.get('status') == 'complete'))
    print(f"\nParsed {parsed} of {len(emails)} emails")
    print(f"Results saved to {saved_path}")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
