from currency_flags.utils import normalize_country_code, normalize_currency_code, normalize_query, unique


def test_normalize_codes():
    assert normalize_currency_code(' usd ') == 'USD'
    assert normalize_currency_code(None) == ''
    assert normalize_currency_code(978) == '978'
    assert normalize_country_code('\tgb\n') == 'GB'
    assert normalize_country_code('') == ''


def test_normalize_query():
    assert normalize_query('  British POUND ') == 'british pound'
    assert normalize_query(None) == ''


def test_unique_keeps_first_seen_order():
    assert unique(['US', 'EC', 'US', 'PA', 'EC']) == ['US', 'EC', 'PA']
    assert unique([]) == []
