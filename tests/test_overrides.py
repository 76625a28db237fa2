from __future__ import annotations

from typing import Any

from api.models import FeatureSpec, ProcessedAPIData, Tag, channel_rank
from overrides.features import Availability, FeatureQueryAll, merge_alternatives
from overrides.tags import CHANNEL_TAG, RenderOverride


def _features(raw: dict[str, Any]) -> dict[str, FeatureSpec | list[FeatureSpec]]:
    return ProcessedAPIData.model_validate({"feature": raw}).feature


def test_undefined_feature_chain_has_no_channel() -> None:
    query = FeatureQueryAll({})

    assert query.availability("tabs") is None
    assert query.resolve("tabs.Tab.url") == Availability()


def test_child_feature_restricts_parent_channel() -> None:
    query = FeatureQueryAll(
        _features(
            {
                "tabs": {"channel": "stable"},
                "tabs.Tab.groupId": {"channel": "dev"},
            }
        )
    )

    assert query.resolve("tabs.Tab").channel == "stable"
    assert query.resolve("tabs.Tab.groupId").channel == "dev"


def test_stable_child_cannot_widen_beta_parent() -> None:
    query = FeatureQueryAll(
        _features(
            {
                "sidePanel": {"channel": "beta"},
                "sidePanel.open": {"channel": "stable"},
            }
        )
    )

    assert query.resolve("sidePanel.open").channel == "beta"


def test_alternatives_resolve_to_most_available() -> None:
    specs = [
        FeatureSpec(channel="dev", platforms=["linux"]),
        FeatureSpec(channel="beta", platforms=["win"]),
    ]

    merged = merge_alternatives(specs)

    assert merged.channel == "beta"
    assert merged.platforms == frozenset({"linux", "win"})


def test_alternative_without_platforms_is_unrestricted() -> None:
    merged = merge_alternatives(
        [FeatureSpec(platforms=["chromeos"]), FeatureSpec(channel="stable")]
    )

    assert merged.platforms is None
    assert merged.channel == "stable"


def test_unknown_channel_ranks_below_known_channels() -> None:
    assert channel_rank("stable") < channel_rank("trunk") < channel_rank("nightly")


def test_unknown_channel_restricts_stable_parent() -> None:
    query = FeatureQueryAll(
        _features(
            {
                "tabs": {"channel": "stable"},
                "tabs.group": {"channel": "nightly"},
            }
        )
    )

    assert query.resolve("tabs.group").channel == "nightly"


def test_known_alternative_wins_over_unknown_channel() -> None:
    merged = merge_alternatives(
        [FeatureSpec(channel="nightly"), FeatureSpec(channel="dev")]
    )

    assert merged.channel == "dev"


def test_chain_combines_permissions_and_platforms() -> None:
    query = FeatureQueryAll(
        _features(
            {
                "tabs": {
                    "dependencies": ["permission:tabs", "manifest:background"],
                    "platforms": ["linux", "mac", "win"],
                },
                "tabs.capture": {
                    "dependencies": ["permission:activeTab"],
                    "platforms": ["mac", "win", "chromeos"],
                    "disallow_for_service_workers": True,
                },
            }
        )
    )

    resolved = query.resolve("tabs.capture")

    assert resolved.permissions == frozenset({"tabs", "activeTab"})
    assert resolved.platforms == frozenset({"mac", "win"})
    assert resolved.disallow_service_workers is True


def test_complete_tags_for_emits_tags_in_fixed_order() -> None:
    features = _features(
        {
            "sidePanel": {
                "channel": "beta",
                "dependencies": ["permission:sidePanel"],
                "platforms": ["win", "linux"],
                "min_manifest_version": 3,
                "disallow_for_service_workers": True,
            }
        }
    )
    override = RenderOverride({"sidePanel": {}}, FeatureQueryAll(features))

    tags = override.complete_tags_for({"deprecated": "gone"}, "sidePanel.open")

    assert tags == [
        Tag(name=CHANNEL_TAG, value="beta"),
        Tag(name="chrome-permission", value="sidePanel"),
        Tag(name="chrome-platform", value="linux"),
        Tag(name="chrome-platform", value="win"),
        Tag(name="chrome-manifest", value="mv3"),
        Tag(name="chrome-disallow-service-workers", value=""),
        Tag(name="deprecated", value="gone"),
    ]


def test_complete_tags_for_omits_channel_without_feature() -> None:
    override = RenderOverride({"tabs": {}}, FeatureQueryAll({}))

    assert override.complete_tags_for({}, "tabs.query") == []


def test_members_inherit_namespace_deprecation_tag() -> None:
    api = {"oldApi": {"deprecated": "Use newApi."}}
    override = RenderOverride(api, FeatureQueryAll({}))

    assert override.complete_tags_for({}, "oldApi.f") == [
        Tag(name="deprecated", value="Use newApi.")
    ]
    assert override.complete_tags_for(api["oldApi"], "oldApi") == [
        Tag(name="deprecated", value="Use newApi.")
    ]


def test_boolean_deprecation_gives_empty_message() -> None:
    override = RenderOverride({}, FeatureQueryAll({}))

    assert override.complete_tags_for({"deprecated": True}, "x.y") == [
        Tag(name="deprecated", value="")
    ]
