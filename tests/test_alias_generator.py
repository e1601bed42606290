from operator_catalog.alias_generator import (
    generate_aliases,
    phonetic_key,
    pinyinify,
    strip_quotes,
    to_traditional,
    unique,
)


def test_strip_quotes():
    assert strip_quotes('“推进之王”') == '推进之王'
    assert strip_quotes('"W"') == 'W'


def test_to_traditional():
    assert to_traditional('医疗') == '醫療'
    assert to_traditional('醫療') == '醫療'


def test_pinyinify_full_reading_before_first_letters():
    readings = list(pinyinify('医疗'))
    assert readings == ['yiliao', 'yl']


def test_unique_keeps_first_occurrence():
    assert unique(['b', 'a', 'b', 'c', 'a']) == ['b', 'a', 'c']


def test_generate_aliases_contains_all_forms():
    result = generate_aliases('医疗')
    tokens = result['alias'].split(' ')

    assert result['name'] == '医疗'
    assert tokens[:3] == ['yiliao', 'yl', '醫療']
    assert tokens.count('yiliao') == 1


def test_generate_aliases_expands_readings():
    tokens = generate_aliases('测试干员')['alias'].split(' ')

    assert tokens[0] == 'ceshiganyuan'
    assert 'csgy' in tokens


def test_generate_aliases_flattens_heteronyms():
    tokens = generate_aliases('重名干员')['alias'].split(' ')

    for reading in ['zhongmingganyuan', 'chongmingganyuan', 'zmgy', 'cmgy']:
        assert reading in tokens, reading
    assert tokens.index('zhongmingganyuan') < tokens.index('zmgy')
    assert tokens.index('chongmingganyuan') < tokens.index('zmgy')


def test_generate_aliases_no_duplicate_tokens():
    for name in ['测试干员', '重名干员', '医疗', '阿米娅', '“推进之王”']:
        tokens = generate_aliases(name)['alias'].split(' ')
        assert len(tokens) == len(set(tokens)), name


def test_generate_aliases_keeps_quotes_in_name():
    result = generate_aliases('“测试”')
    tokens = result['alias'].split(' ')

    assert result['name'] == '“测试”'
    assert tokens[:2] == ['ceshi', 'cs']
    assert tokens[2:4] == ['“測試”', '測試']


def test_generate_aliases_passes_latin_names_through():
    assert generate_aliases('Lancet-2') == {'name': 'Lancet-2', 'alias': 'Lancet-2'}


def test_phonetic_key_orders_by_reading():
    assert phonetic_key('李四') < phonetic_key('张三')
    assert phonetic_key('李') == phonetic_key('理')
