# Put the repository root on sys.path so tests can import `operator_catalog` and `main`
import os
import sys

import pytest

HERE = os.path.dirname(__file__)
ROOT = os.path.abspath(os.path.join(HERE, ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


def make_record(name, profession, sub_prof, appellation=None):
    return {
        'name': name,
        'profession': profession,
        'subProfessionId': sub_prof,
        'appellation': appellation,
    }


@pytest.fixture
def sub_prof_dict():
    return {
        'medic_a': {'subProfessionId': 'medic_a', 'subProfessionName': '医师'},
        'medic_b': {'subProfessionId': 'medic_b', 'subProfessionName': '群愈师'},
        'guard_a': {'subProfessionId': 'guard_a', 'subProfessionName': '教官'},
    }


@pytest.fixture
def char_table():
    return {
        'trap_001_crate': make_record('障碍物', 'TRAP', 'none'),
        'token_001_drone': make_record('无人机', 'TOKEN', 'support_token'),
        'char_001_test': make_record('测试干员', 'MEDIC', 'medic_a', 'Tester'),
    }
