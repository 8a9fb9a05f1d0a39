"""
# src/flightmail/storage/email_storage.py
# Load raw email dumps and save parse results as JSON
"""

import json
import os
from datetime import datetime
from typing import Dict, List

from ..utils.logger import get_logger

logger = get_logger(__name__)


class EmailStorageError(Exception):
    """Raised when a stored email file cannot be read."""


class EmailStorage:
    def __init__(self, storage_dir: str = "data/raw_emails"):
        self.storage_dir = storage_dir

    def _resolve(self, path: str) -> str:
        if os.path.isabs(path) or os.path.exists(path):
            return path
        return os.path.join(self.storage_dir, path)

    def load_emails(self, specific_file: str) -> List[Dict]:
        """
        Load emails from a JSON file.

        Accepts either ``{"metadata": ..., "emails": [...]}`` or a bare list
        of email dicts. Relative paths that do not exist as given are looked
        up inside ``storage_dir``.
        """
        filepath = self._resolve(specific_file)
        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise EmailStorageError(f"Error loading emails from {filepath}: {e}") from e

        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            return data.get('emails', [])
        raise EmailStorageError(f"Unexpected email file layout in {filepath}")

    def save_results(self, results: List[Dict], output_file: str, email_count: int = None) -> str:
        """
        Save parse results to a JSON file

        Args:
            results: List of result or record dictionaries
            output_file: Destination path
            email_count: Number of emails processed (defaults to len(results))

        Returns:
            Path to the saved file
        """
        directory = os.path.dirname(output_file)
        if directory:
            os.makedirs(directory, exist_ok=True)

        parsed_count = sum(1 for item in results if item.get('success', item.get('status') == 'complete'))
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump({
                'metadata': {
                    'process_date': datetime.now().isoformat(),
                    'email_count': email_count if email_count is not None else len(results),
                    'parsed_count': parsed_count,
                },
                'results': results
            }, f, indent=2, ensure_ascii=False)

        logger.info(f"Saved {len(results)} results to {output_file}")
        return output_file
