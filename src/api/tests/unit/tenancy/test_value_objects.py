"""Unit tests for tenancy value objects."""

from __future__ import annotations

import pytest

from tenancy.domain.value_objects import (
    SocialLinks,
    TenantIdentity,
    TenantRecord,
    TenantResolutionState,
)


class TestTenantIdentity:
    def test_from_record_requires_tenant_id(self):
        with pytest.raises(ValueError):
            TenantIdentity.from_record(TenantRecord(tenant_id=None))

    def test_from_record_normalizes_name_and_slug(self):
        tenant = TenantIdentity.from_record(
            TenantRecord(tenant_id="t1", business_name="café  del  SOL")
        )

        assert tenant.name == "Café Del Sol"
        assert tenant.slug == "cafe-del-sol"


class TestSocialLinks:
    def test_empty_mapping_is_none(self):
        assert SocialLinks.from_mapping({}) is None
        assert SocialLinks.from_mapping(None) is None


class TestTenantResolutionState:
    def test_initial_state_is_loading(self):
        state = TenantResolutionState.initial()

        assert state.loading is True
        assert state.tenant is None
        assert not state.is_landing_domain
        assert not state.store_not_found

    def test_terminal_states_are_exclusive(self, tenant):
        for state in (
            TenantResolutionState.landing(),
            TenantResolutionState.resolved(tenant),
            TenantResolutionState.not_found(),
        ):
            flags = [
                state.tenant is not None,
                state.is_landing_domain,
                state.store_not_found,
                state.loading,
            ]
            assert flags.count(True) == 1
