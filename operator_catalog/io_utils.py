"""
Filesystem helpers.
"""

import json
import os


def file_exists(filepath: str) -> bool:
    return os.path.exists(filepath)


def save_to_json(data, filepath: str, indent: int = 2):
    """Write data as UTF-8 JSON, creating parent directories"""
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=indent)
