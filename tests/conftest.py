"""Shared fixtures for sqlbeautifier tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_queries() -> list[str]:
    """Realistic queries used by several property checks."""
    return [
        "select a,b from t where a=1 and b=2",
        "SELECT DISTINCT u.id, u.name, count(o.id) AS orders FROM users u "
        "LEFT JOIN orders o ON o.user_id = u.id WHERE u.active = TRUE "
        "GROUP BY u.id, u.name HAVING count(o.id) > 3 ORDER BY orders DESC;",
        "select case when x = 1 then 'one' when x = 2 then 'two' else 'many' end as label from t",
        "select a from t where a in (select b from u where c = 1) or d between 1 and 5",
        "-- header\nselect /* cols */ a, 'it''s' as s from t -- trailing",
        "insert into t (a, b) values (1, 'x'), (2, 'y')",
        "select row_number() over (partition by a order by b) as rn from t",
        "select a from t union all select b from u",
        "update t set a = a + 1 where id <> 3",
        "select t.*, coalesce(x, 0) from t inner join u on t.id = u.id and t.k = u.k",
    ]
