"""Tests for the heuristic model parser in ingestion/parser.py."""

import pytest

from dbt_simulator.ingestion import parse_sql_model
from dbt_simulator.ingestion.parser import detect_columns, detect_materialization, extract_refs

FCT_ORDERS = """
{{ config(materialized='table') }}

select
  {{ dbt_utils.surrogate_key(['o.order_id']) }} as order_sk,
  o.order_id,
  {{ cents_to_dollars('o.order_total_cents') }} as order_total_dollars,
  c.customer_name
from {{ ref('stg_orders') }} as o
left join {{ ref("stg_customers") }} as c
  on o.customer_id = c.customer_id
"""


class TestRefs:
    """Tests for ref() extraction."""

    def test_refs_in_order(self) -> None:
        assert extract_refs(FCT_ORDERS) == ["stg_orders", "stg_customers"]

    def test_duplicates_preserved(self) -> None:
        sql = "select * from {{ ref('a') }} union all select * from {{ ref('a') }}"
        assert extract_refs(sql) == ["a", "a"]

    def test_whitespace_and_case(self) -> None:
        assert extract_refs("{{ REF(  'my-model'  ) }}") == ["my-model"]

    def test_source_is_not_a_ref(self) -> None:
        assert extract_refs("select * from {{ source('raw', 'orders') }}") == []


class TestMaterialization:
    """Tests for materialization detection."""

    def test_configured(self) -> None:
        assert detect_materialization(FCT_ORDERS) == "table"

    def test_lowercased(self) -> None:
        assert detect_materialization("{{ config(materialized = \"INCREMENTAL\") }}") == "incremental"

    def test_default_view(self) -> None:
        assert detect_materialization("select 1 from x") == "view"


class TestColumns:
    """Tests for output column detection."""

    def test_aliases_and_bare_columns(self) -> None:
        assert detect_columns(FCT_ORDERS) == [
            "order_sk",
            "o.order_id",
            "order_total_dollars",
            "c.customer_name",
        ]

    def test_quotes_stripped(self) -> None:
        assert detect_columns('select "id", `name` from t') == ["id", "name"]

    def test_deduplicated(self) -> None:
        assert detect_columns("select a, b, a from t") == ["a", "b"]

    def test_case_insensitive_keywords(self) -> None:
        assert detect_columns("SELECT id AS order_id FROM t") == ["order_id"]

    def test_no_select(self) -> None:
        assert detect_columns("{{ config(materialized='view') }}") == []


class TestParseSqlModel:
    """Tests for the combined parse result."""

    def test_full_parse(self) -> None:
        parsed = parse_sql_model(FCT_ORDERS)
        assert parsed.refs == ["stg_orders", "stg_customers"]
        assert parsed.materialization == "table"
        assert "order_sk" in parsed.columns

    @pytest.mark.parametrize("text", ["", "{{ ref(", "select from", "}}{{ {% %}", "\x00\x01"])
    def test_never_raises(self, text: str) -> None:
        parsed = parse_sql_model(text)
        assert parsed.materialization == "view"
        assert isinstance(parsed.refs, list)
        assert isinstance(parsed.columns, list)
