"""
Operator catalog pipeline.
Filters raw character records, attaches aliases, builds the profession
taxonomy and returns the deduplicated, phonetically sorted catalog.
"""

from collections import Counter
from typing import Dict, List, Mapping, Optional

from tqdm import tqdm

from .alias_generator import generate_aliases, phonetic_key
from .constants import CHARACTER_BLOCKLIST, EXCLUDED_CATEGORIES
from .game_data_fetcher import GameDataFetcher
from .taxonomy_builder import ProfessionTaxonomy


def make_entry(char_id: str, record: Mapping) -> Dict:
    """Build one catalog entry from a raw character record"""
    return {
        'id': char_id,
        'subProf': record['subProfessionId'],
        **generate_aliases(record['name']),
        'alt_name': record['appellation'],
    }


def unique_by_name(entries: List[Dict]) -> List[Dict]:
    """Keep the first entry seen for each display name"""
    seen = set()
    result = []
    for entry in entries:
        if entry['name'] not in seen:
            seen.add(entry['name'])
            result.append(entry)
    return result


def sort_entries(entries: List[Dict]) -> List[Dict]:
    """Order by pinyin reading of the name, then by id"""
    return sorted(entries, key=lambda e: (phonetic_key(e['name']), e['id']))


def build_catalog(char_table: Mapping[str, Mapping], sub_prof_dict: Mapping[str, Dict],
                  blocklist=CHARACTER_BLOCKLIST, progress: bool = False) -> Dict:
    """
    Run the pipeline over a character table.

    Args:
        char_table: character id -> raw record, iterated in key order
        sub_prof_dict: sub-profession id -> descriptor with 'subProfessionName'
        blocklist: ids removed from the final operator list
        progress: show a tqdm bar over the records

    Returns:
        {'professions': [...], 'operators': [...]}
    """
    taxonomy = ProfessionTaxonomy(sub_prof_dict)
    entries = []

    for char_id, record in tqdm(char_table.items(), total=len(char_table),
                                desc="Processing records", disable=not progress):
        if record['profession'] in EXCLUDED_CATEGORIES:
            continue

        taxonomy.add(record)
        entries.append(make_entry(char_id, record))

    operators = sort_entries(unique_by_name(entries))

    return {
        'professions': taxonomy.professions,
        'operators': [op for op in operators if op['id'] not in blocklist],
    }


def count_by_profession(catalog: Dict) -> Counter:
    """Number of operators under each profession; unmatched ones count as 'Unclassified'"""
    owner = {
        sub['id']: prof['id']
        for prof in catalog['professions']
        for sub in prof['sub']
    }
    return Counter(owner.get(op['subProf'], 'Unclassified') for op in catalog['operators'])


def get_operators(fetcher: Optional[GameDataFetcher] = None, progress: bool = False) -> Dict:
    """Fetch both game data tables and build the catalog"""
    if fetcher is None:
        with GameDataFetcher() as owned:
            char_table, uniequip_table = owned.fetch_tables()
    else:
        char_table, uniequip_table = fetcher.fetch_tables()

    return build_catalog(char_table, uniequip_table['subProfDict'], progress=progress)
