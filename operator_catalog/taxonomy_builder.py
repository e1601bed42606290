"""
Profession taxonomy built incrementally from character records.
"""

from typing import Dict, List, Mapping

from .constants import PROFESSION_NAMES, TAXONOMY_EXCLUDED_CATEGORIES


class UnknownIdentifierError(KeyError):
    """Raised when a profession or sub-profession id has no known name"""

    def __init__(self, kind: str, identifier: str):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"Unknown {kind} id: {identifier!r}")

    def __str__(self):
        return self.args[0]


class ProfessionTaxonomy:
    """Two-level profession -> sub-profession tree in first-seen order"""

    def __init__(self, sub_prof_dict: Mapping[str, Dict],
                 profession_names: Mapping[str, str] = PROFESSION_NAMES):
        self.sub_prof_dict = sub_prof_dict
        self.profession_names = profession_names
        self.professions: List[Dict] = []
        self._index: Dict[str, Dict] = {}

    def profession_name(self, profession_id: str) -> str:
        if profession_id not in self.profession_names:
            raise UnknownIdentifierError('profession', profession_id)
        return self.profession_names[profession_id]

    def sub_profession_name(self, sub_prof_id: str) -> str:
        descriptor = self.sub_prof_dict.get(sub_prof_id)
        if descriptor is None or 'subProfessionName' not in descriptor:
            raise UnknownIdentifierError('sub-profession', sub_prof_id)
        return descriptor['subProfessionName']

    def add(self, record: Mapping) -> bool:
        """
        Register the record's profession and sub-profession.

        Tokens are ignored. Returns True when the tree changed.
        """
        profession_id = record['profession']
        if profession_id in TAXONOMY_EXCLUDED_CATEGORIES:
            return False

        sub_prof_id = record['subProfessionId']
        prof = self._index.get(profession_id)

        if prof is None:
            prof = {
                'id': profession_id,
                'name': self.profession_name(profession_id),
                'sub': [{
                    'id': sub_prof_id,
                    'name': self.sub_profession_name(sub_prof_id),
                }],
            }
            self._index[profession_id] = prof
            self.professions.append(prof)
            return True

        if any(sub['id'] == sub_prof_id for sub in prof['sub']):
            return False

        prof['sub'].append({
            'id': sub_prof_id,
            'name': self.sub_profession_name(sub_prof_id),
        })
        return True

