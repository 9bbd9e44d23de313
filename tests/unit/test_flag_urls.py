from pathlib import Path

import pytest

from currency_flags.flag_urls import FLAGS_DIR, flag_url_from_country_code, to_flag_filename


def test_to_flag_filename():
    assert to_flag_filename('US') == 'us.svg'
    assert to_flag_filename(' Gb ') == 'gb.svg'
    assert to_flag_filename(None) == '.svg'


def test_flag_url_is_absolute_file_uri():
    url = flag_url_from_country_code('de')
    assert url.startswith('file://')
    assert url.endswith('/flags/de.svg')
    assert url == (FLAGS_DIR / 'de.svg').as_uri()


def test_flag_url_uses_given_directory(temp_dir):
    url = flag_url_from_country_code('FR', temp_dir)
    assert url == (temp_dir.resolve() / 'fr.svg').as_uri()
    # resolution never touches the file system
    assert not (temp_dir / 'fr.svg').exists()


def test_flag_url_accepts_str_directory(temp_dir):
    assert flag_url_from_country_code('it', str(temp_dir)) == flag_url_from_country_code('it', Path(temp_dir))


@pytest.mark.parametrize('code', [None, '', '   '])
def test_flag_url_rejects_empty_code(code):
    with pytest.raises(ValueError):
        flag_url_from_country_code(code)


def test_index_flag_urls(sample_index, temp_dir):
    expected = (temp_dir.resolve() / 'flags' / 'us.svg').as_uri()
    assert sample_index.get_flag_url_by_country_code('us') == expected
    assert sample_index.get_flag_url_by_country_code('US') == expected
    assert sample_index.get_flag_url_by_country_code(' Us ') == expected
    assert sample_index.get_flag_url_by_country_code('') is None
    assert sample_index.get_flag_url_by_country_code(None) is None


def test_index_flag_url_failure_returns_none(sample_index, mocker):
    mocker.patch('currency_flags.index.flag_url_from_country_code', side_effect=OSError('boom'))
    assert sample_index.get_flag_url_by_country_code('US') is None


def test_flag_url_by_currency_code(sample_index):
    assert sample_index.get_flag_url_by_currency_code('eur').endswith('/eu.svg')
    assert sample_index.get_flag_url_by_currency_code('XAU').endswith('/xx.svg')
    assert sample_index.get_flag_url_by_currency_code('ZZZ') is None
    assert sample_index.get_flag_url_by_currency_code(None) is None


def test_flag_urls_for_currency(sample_index):
    urls = sample_index.get_flag_urls_for_currency('GBP')
    assert urls.primary.endswith('/gb.svg')
    assert [url.rsplit('/', 1)[-1] for url in urls.others] == ['im.svg', 'je.svg']

    single = sample_index.get_flag_urls_for_currency('PAB')
    assert single.primary.endswith('/pa.svg')
    assert single.others == []

    missing = sample_index.get_flag_urls_for_currency('ZZZ')
    assert missing.primary is None
    assert missing.others == []
