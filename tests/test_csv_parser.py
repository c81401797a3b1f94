from tradedesk.services.csv_parser import parse_csv

from conftest import PRICES_CSV, TRADES_CSV


def test_returns_one_row_per_data_line():
    rows = parse_csv(TRADES_CSV)

    assert len(rows) == 4
    assert rows[0] == {
        "trade_id": "T1",
        "trade_date": "2024-01-15",
        "trader": "Alice",
        "instrument": "WTI-CRUDE",
        "side": "buy",
        "quantity": "1000",
        "trade_price": "75.50",
        "currency": "USD",
    }


def test_price_rows_keyed_by_header():
    rows = parse_csv(PRICES_CSV)

    assert [r["close_price"] for r in rows] == ["75.80", "76.00", "80.00"]
    assert set(rows[0]) == {"instrument", "price_date", "close_price"}


def test_header_only_or_empty_text_gives_no_rows():
    assert parse_csv("") == []
    assert parse_csv("trade_id,trade_date\n") == []
    assert parse_csv("   \n  ") == []


def test_headers_and_values_are_trimmed():
    rows = parse_csv(" instrument , close_price \r\n  GOLD ,  2050.1 \r\n")

    assert rows == [{"instrument": "GOLD", "close_price": "2050.1"}]


def test_short_rows_leave_missing_columns_empty():
    rows = parse_csv("a,b,c\n1,2\n")

    assert rows == [{"a": "1", "b": "2", "c": None}]


def test_embedded_commas_are_not_quoted():
    rows = parse_csv('name,value\n"Smith, J",5\n')

    assert rows == [{"name": '"Smith', "value": 'J"'}]
