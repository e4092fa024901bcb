def test_health_db(client):
    r = client.get("/health/db")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_health_migrations_basic(client):
    r = client.get("/health/migrations")
    assert r.status_code == 200
    b = r.json()
    assert "code_heads" in b and isinstance(b["code_heads"], list)
    assert len(b["code_heads"]) == 1
    assert "db_version" in b


def test_tables_created_by_the_app_are_stamped_at_head(client):
    b = client.get("/health/migrations").json()
    assert b["db_version"] == b["code_heads"][0]
    assert b["synced"] is True
