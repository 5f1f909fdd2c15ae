from cybersite.application.services.seed_service import (
    DEFAULT_NAVIGATION,
    DEFAULT_PUBLIC_SETTINGS,
    seed_defaults,
)
from cybersite.domain.models import NavigationItem, SiteSetting


def test_seed_fills_empty_tables(db, client):
    seed_defaults(db)

    labels = [item.label for item in db.query(NavigationItem).order_by(NavigationItem.sort_order)]
    assert labels == [item["label"] for item in DEFAULT_NAVIGATION]

    settings = client.get("/api/settings/public").json()
    assert set(settings) == {key for key, *_ in DEFAULT_PUBLIC_SETTINGS}


def test_seed_is_idempotent(db, count_rows):
    seed_defaults(db)
    seed_defaults(db)

    assert count_rows(NavigationItem) == len(DEFAULT_NAVIGATION)
    assert count_rows(SiteSetting) == len(DEFAULT_PUBLIC_SETTINGS)


def test_seed_leaves_existing_content_alone(db, count_rows):
    db.add(NavigationItem(label="Only", path="/only"))
    db.add(SiteSetting(key="site_name", value="Mine", type="string", is_public=True))
    db.commit()

    seed_defaults(db)

    assert count_rows(NavigationItem) == 1
    assert count_rows(SiteSetting) == 1
