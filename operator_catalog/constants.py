"""
Static configuration for the operator catalog.
Tables here are read-only; nothing writes to them after import.
"""

from types import MappingProxyType

# ============================================================
# Data Source
# ============================================================

GAMEDATA_BASE_URL = "https://raw.githubusercontent.com/Kengxxiao/ArknightsGameData/master/zh_CN/gamedata/excel"
CHARACTER_TABLE_JSON_URL = f"{GAMEDATA_BASE_URL}/character_table.json"
UNIEQUIP_TABLE_JSON_URL = f"{GAMEDATA_BASE_URL}/uniequip_table.json"

REQUEST_HEADERS = MappingProxyType({
    'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
    'Accept': 'application/json,text/plain;q=0.9,*/*;q=0.8',
    'Accept-Encoding': 'gzip, deflate',
    'Connection': 'keep-alive',
})

REQUEST_TIMEOUT = 30

# ============================================================
# Categories
# ============================================================

# Never part of the catalog
CATEGORY_TRAP = 'TRAP'
# Listed as operators but kept out of the profession tree
CATEGORY_TOKEN = 'TOKEN'

EXCLUDED_CATEGORIES = frozenset({CATEGORY_TRAP})
TAXONOMY_EXCLUDED_CATEGORIES = frozenset({CATEGORY_TOKEN})

# ============================================================
# Lookup Tables
# ============================================================

PROFESSION_NAMES = MappingProxyType({
    'MEDIC': '医疗',
    'WARRIOR': '近卫',
    'SPECIAL': '特种',
    'SNIPER': '狙击',
    'PIONEER': '先锋',
    'TANK': '重装',
    'CASTER': '术师',
    'SUPPORT': '辅助',
})

CHARACTER_BLOCKLIST = frozenset({
    'char_512_aprot',             # 暮落 (integrated strategies only)
    'token_10012_rosmon_shield',  # 迷迭香的战术装备 (not selectable)
})

# Stripped from names before transliteration
QUOTE_CHARACTERS = '"“”'
