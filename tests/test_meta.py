from serverkit.meta import (
    CreateOptions,
    DeleteOptions,
    ListMeta,
    ListOptions,
    UpdateOptions,
)


def test_list_options_omits_unset():
    assert ListOptions().to_dict() == {}


def test_list_options_keeps_zero_offset():
    data = ListOptions(label_selector="a=b", offset=0).to_dict()
    assert data == {"labelSelector": "a=b", "offset": 0}


def test_list_options_all_fields():
    opts = ListOptions(label_selector="a=b", field_selector="c=d", offset=1, limit=2)
    data = opts.to_dict()
    assert data["fieldSelector"] == "c=d"
    assert data["limit"] == 2
    assert len(data) == 4


def test_delete_options_always_has_unscoped():
    assert DeleteOptions().to_dict() == {"unscoped": False}
    assert DeleteOptions(unscoped=True).to_dict() == {"unscoped": True}


def test_create_and_update_dry_run():
    assert CreateOptions().to_dict() == {}
    assert CreateOptions(dry_run=["All"]).to_dict() == {"dryRun": ["All"]}
    assert UpdateOptions().to_dict() == {}
    assert UpdateOptions(dry_run=["All"]).to_dict() == {"dryRun": ["All"]}


def test_list_meta_total_count():
    assert ListMeta().to_dict() == {}
    assert ListMeta(total_count=5).to_dict() == {"totalCount": 5}