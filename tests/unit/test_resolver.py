"""
Unit tests for CachingConfigurationResolver.

Covers metadata capture, configurer selection, collaborator extraction
and the resolution lifecycle.
"""

from unittest.mock import Mock

import pytest

from caching_configurer.attributes import EnableAttributes
from caching_configurer.constants import ENABLE_CACHING_ANNOTATION
from caching_configurer.exceptions import (
    AmbiguousConfigurerError,
    ConfigurationError,
    MissingDirectiveError,
)
from caching_configurer.options import AdviceMode
from caching_configurer.resolver import (
    CachingConfigurationResolver,
    ResolutionState,
    ResolvedConfiguration,
)
from caching_configurer.support import CachingConfigurerSupport


def _assert_unset(configuration: ResolvedConfiguration) -> None:
    assert configuration.cache_manager is None
    assert configuration.cache_resolver is None
    assert configuration.key_generator is None
    assert configuration.error_handler is None


class TestCaptureMetadata:
    """Test directive metadata capture."""

    def test_returns_declared_attributes(self, annotated_metadata, declared_attributes) -> None:
        """Test capture returns a mapping equal to the declared attributes."""
        # Arrange
        resolver = CachingConfigurationResolver()

        # Act
        attributes = resolver.capture_metadata(annotated_metadata)

        # Assert
        assert isinstance(attributes, EnableAttributes)
        assert dict(attributes) == declared_attributes
        assert annotated_metadata.lookups == [ENABLE_CACHING_ANNOTATION]

    def test_stores_attributes_on_configuration(self, annotated_metadata) -> None:
        """Test captured attributes are retained for downstream consumers."""
        # Arrange
        resolver = CachingConfigurationResolver()

        # Act
        attributes = resolver.capture_metadata(annotated_metadata)

        # Assert
        assert resolver.configuration.enable_attributes is attributes
        assert resolver.state is ResolutionState.METADATA_CAPTURED

    def test_captured_attributes_ignore_later_changes(self, annotated_metadata, declared_attributes) -> None:
        """Test the captured mapping does not follow mutations of the source."""
        # Arrange
        resolver = CachingConfigurationResolver()
        attributes = resolver.capture_metadata(annotated_metadata)

        # Act
        declared_attributes["order"] = 99

        # Assert
        assert attributes["order"] == 10

    def test_missing_directive_names_class(self, bare_metadata) -> None:
        """Test missing directive fails with the offending class name."""
        # Arrange
        resolver = CachingConfigurationResolver()

        # Act & Assert
        with pytest.raises(MissingDirectiveError, match="app.config.PlainConfig") as exc_info:
            resolver.capture_metadata(bare_metadata)

        assert exc_info.value.class_name == "app.config.PlainConfig"
        assert resolver.configuration.enable_attributes is None
        assert resolver.state is ResolutionState.FAILED

    def test_custom_annotation_name(self, metadata_factory) -> None:
        """Test resolver looks up the configured directive name only."""
        # Arrange
        metadata = metadata_factory("app.Config", {"custom.EnableCache": {"mode": "aspectj"}})
        resolver = CachingConfigurationResolver(annotation_name="custom.EnableCache")

        # Act
        attributes = resolver.capture_metadata(metadata)

        # Assert
        assert attributes.annotation_name == "custom.EnableCache"
        assert attributes["mode"] == "aspectj"

    def test_empty_attributes_are_present(self, metadata_factory) -> None:
        """Test a directive with no declared options still counts as present."""
        # Arrange
        metadata = metadata_factory("app.Config", {ENABLE_CACHING_ANNOTATION: {}})
        resolver = CachingConfigurationResolver()

        # Act
        attributes = resolver.capture_metadata(metadata)

        # Assert
        assert len(attributes) == 0


class TestSelectConfigurer:
    """Test configurer selection cardinality rules."""

    @pytest.mark.parametrize("candidates", [[], (), None, iter([])])
    def test_no_candidates_returns_none(self, candidates) -> None:
        """Test empty candidate collections select nothing."""
        # Arrange
        resolver = CachingConfigurationResolver()

        # Act
        result = resolver.select_configurer(candidates)

        # Assert
        assert result is None
        assert resolver.state is ResolutionState.CONFIGURER_SELECTED

    def test_single_candidate_is_returned(self, configurer) -> None:
        """Test a single candidate is selected as-is."""
        # Arrange
        resolver = CachingConfigurationResolver()

        # Act
        result = resolver.select_configurer([configurer])

        # Assert
        assert result is configurer

    def test_single_candidate_from_generator(self, configurer) -> None:
        """Test any iterable of candidates is accepted."""
        # Arrange
        resolver = CachingConfigurationResolver()

        # Act
        result = resolver.select_configurer(c for c in [configurer])

        # Assert
        assert result is configurer

    @pytest.mark.parametrize("count", [2, 3, 7])
    def test_multiple_candidates_fail_with_count(self, count: int) -> None:
        """Test two or more candidates fail reporting the exact count."""
        # Arrange
        resolver = CachingConfigurationResolver()
        candidates = [CachingConfigurerSupport() for _ in range(count)]

        # Act & Assert
        with pytest.raises(AmbiguousConfigurerError) as exc_info:
            resolver.select_configurer(candidates)

        assert exc_info.value.count == count
        assert f"{count} implementations of CachingConfigurer" in str(exc_info.value)
        assert "only 1 was expected" in str(exc_info.value)
        assert resolver.state is ResolutionState.FAILED

    def test_selection_is_idempotent(self, configurer) -> None:
        """Test repeated selection over a stable collection gives the same result."""
        # Arrange
        resolver = CachingConfigurationResolver()
        candidates = [configurer]

        # Act
        first = resolver.select_configurer(candidates)
        second = resolver.select_configurer(candidates)

        # Assert
        assert first is second is configurer

    def test_candidate_iteration_error_fails_resolution(self) -> None:
        """Test errors raised while iterating candidates mark the resolution FAILED."""
        # Arrange
        error = RuntimeError("container lookup failed")
        hooks = Mock()
        resolver = CachingConfigurationResolver(hooks=hooks)

        def candidates():
            yield CachingConfigurerSupport()
            raise error

        # Act & Assert
        with pytest.raises(RuntimeError) as exc_info:
            resolver.select_configurer(candidates())

        assert exc_info.value is error
        assert resolver.state is ResolutionState.FAILED
        hooks.on_resolution_error.assert_called_once_with("", error)
        hooks.on_configurer_selected.assert_not_called()


class TestApplyConfigurer:
    """Test collaborator extraction."""

    def test_copies_all_four_collaborators(self, configurer, collaborators) -> None:
        """Test fields equal exactly what the accessors returned."""
        # Arrange
        resolver = CachingConfigurationResolver()

        # Act
        resolver.apply_configurer(configurer)

        # Assert
        configuration = resolver.configuration
        assert configuration.cache_manager is collaborators["cache_manager"]
        assert configuration.cache_resolver is collaborators["cache_resolver"]
        assert configuration.key_generator is collaborators["key_generator"]
        assert configuration.error_handler is collaborators["error_handler"]

    def test_none_overrides_are_copied_verbatim(self, collaborators) -> None:
        """Test "no override" results leave the matching fields unset."""
        # Arrange
        key_generator = collaborators["key_generator"]

        class KeyOnlyConfigurer(CachingConfigurerSupport):
            def key_generator(self):
                return key_generator

        target = ResolvedConfiguration(cache_manager=Mock(name="previous"))
        resolver = CachingConfigurationResolver()

        # Act
        resolver.apply_configurer(KeyOnlyConfigurer(), target)

        # Assert
        assert target.key_generator is key_generator
        assert target.cache_manager is None
        assert target.cache_resolver is None
        assert target.error_handler is None

    def test_reapplying_yields_same_values(self, configurer, collaborators) -> None:
        """Test applying the same configurer twice does not accumulate state."""
        # Arrange
        resolver = CachingConfigurationResolver()
        resolver.apply_configurer(configurer)
        first = (
            resolver.configuration.cache_manager,
            resolver.configuration.cache_resolver,
            resolver.configuration.key_generator,
            resolver.configuration.error_handler,
        )

        # Act
        resolver.apply_configurer(configurer)

        # Assert
        second = (
            resolver.configuration.cache_manager,
            resolver.configuration.cache_resolver,
            resolver.configuration.key_generator,
            resolver.configuration.error_handler,
        )
        assert first == second

    def test_accessor_error_propagates_unchanged(self, configurer) -> None:
        """Test accessor failures propagate with their original identity."""
        # Arrange
        error = RuntimeError("cannot build key generator")
        configurer.key_generator.side_effect = error
        resolver = CachingConfigurationResolver()

        # Act & Assert
        with pytest.raises(RuntimeError) as exc_info:
            resolver.apply_configurer(configurer)

        assert exc_info.value is error
        _assert_unset(resolver.configuration)
        assert resolver.state is ResolutionState.FAILED

    def test_standalone_apply_does_not_skip_states(self, configurer) -> None:
        """Test applying without a prior selection leaves the state unchanged."""
        # Arrange
        resolver = CachingConfigurationResolver()

        # Act
        resolver.apply_configurer(configurer)

        # Assert
        assert resolver.state is ResolutionState.UNINITIALIZED

    def test_apply_after_selection_resolves(self, configurer) -> None:
        """Test applying the selected configurer advances to RESOLVED."""
        # Arrange
        resolver = CachingConfigurationResolver()
        selected = resolver.select_configurer([configurer])

        # Act
        resolver.apply_configurer(selected)

        # Assert
        assert resolver.state is ResolutionState.RESOLVED

    def test_apply_after_failure_stays_failed(self, configurer) -> None:
        """Test a failed resolution is not revived by a later apply."""
        # Arrange
        resolver = CachingConfigurationResolver()
        with pytest.raises(AmbiguousConfigurerError):
            resolver.select_configurer([Mock(), Mock()])

        # Act
        resolver.apply_configurer(configurer)

        # Assert
        assert resolver.state is ResolutionState.FAILED


class TestResolve:
    """Test the full resolution lifecycle."""

    def test_directive_and_no_configurer_keeps_defaults(self, annotated_metadata) -> None:
        """Test directive present with zero configurers resolves with all fields unset."""
        # Arrange
        resolver = CachingConfigurationResolver()

        # Act
        configuration = resolver.resolve(annotated_metadata, [])

        # Assert
        _assert_unset(configuration)
        assert configuration.enable_attributes is not None
        assert configuration.is_customized is False
        assert resolver.state is ResolutionState.RESOLVED

    def test_directive_and_one_configurer(self, annotated_metadata, configurer, collaborators) -> None:
        """Test directive present with one configurer resolves to its collaborators."""
        # Arrange
        resolver = CachingConfigurationResolver()

        # Act
        configuration = resolver.resolve(annotated_metadata, [configurer])

        # Assert
        assert configuration.cache_manager is collaborators["cache_manager"]
        assert configuration.cache_resolver is collaborators["cache_resolver"]
        assert configuration.key_generator is collaborators["key_generator"]
        assert configuration.error_handler is collaborators["error_handler"]
        assert configuration.is_customized is True
        assert resolver.state is ResolutionState.RESOLVED

    def test_directive_and_two_configurers_fails(self, annotated_metadata, configurer) -> None:
        """Test two configurers abort before any collaborator is populated."""
        # Arrange
        other = Mock(name="other_configurer")
        resolver = CachingConfigurationResolver()

        # Act & Assert
        with pytest.raises(AmbiguousConfigurerError, match="2 implementations .* found when only 1 was expected"):
            resolver.resolve(annotated_metadata, [configurer, other])

        _assert_unset(resolver.configuration)
        configurer.cache_manager.assert_not_called()
        other.cache_manager.assert_not_called()
        assert resolver.state is ResolutionState.FAILED

    def test_missing_directive_fails(self, bare_metadata, configurer) -> None:
        """Test missing directive fails naming the class and never touches configurers."""
        # Arrange
        resolver = CachingConfigurationResolver()

        # Act & Assert
        with pytest.raises(MissingDirectiveError, match="app.config.PlainConfig"):
            resolver.resolve(bare_metadata, [configurer])

        configurer.cache_manager.assert_not_called()
        _assert_unset(resolver.configuration)

    def test_ambiguity_error_carries_class_name(self, annotated_metadata) -> None:
        """Test the ambiguity error is attributed to the importing class."""
        # Arrange
        resolver = CachingConfigurationResolver()

        # Act & Assert
        with pytest.raises(AmbiguousConfigurerError) as exc_info:
            resolver.resolve(annotated_metadata, [CachingConfigurerSupport(), CachingConfigurerSupport()])

        assert exc_info.value.class_name == "app.config.CacheConfig"

    def test_populates_provided_configuration(self, annotated_metadata, configurer) -> None:
        """Test the resolver populates a caller-owned configuration."""
        # Arrange
        target = ResolvedConfiguration()
        resolver = CachingConfigurationResolver(configuration=target)

        # Act
        result = resolver.resolve(annotated_metadata, [configurer])

        # Assert
        assert result is target

    def test_second_resolve_is_rejected(self, annotated_metadata) -> None:
        """Test resolution runs only once per lifecycle."""
        # Arrange
        resolver = CachingConfigurationResolver()
        resolver.resolve(annotated_metadata, [])

        # Act & Assert
        with pytest.raises(ConfigurationError, match="already been resolved"):
            resolver.resolve(annotated_metadata, [])

    def test_failed_resolver_cannot_be_reused(self, bare_metadata, annotated_metadata) -> None:
        """Test a failed resolution leaves the resolver unusable."""
        # Arrange
        resolver = CachingConfigurationResolver()
        with pytest.raises(MissingDirectiveError):
            resolver.resolve(bare_metadata, [])

        # Act & Assert
        with pytest.raises(ConfigurationError):
            resolver.resolve(annotated_metadata, [])

    def test_resolved_options(self, annotated_metadata) -> None:
        """Test directive options are readable from the resolved configuration."""
        # Arrange
        resolver = CachingConfigurationResolver()

        # Act
        options = resolver.resolve(annotated_metadata, []).options

        # Assert
        assert options.mode is AdviceMode.PROXY
        assert options.order == 10
        assert options.proxy_target_class is False


class TestResolverHooks:
    """Test hook notifications during resolution."""

    def test_success_notifies_each_transition(self, annotated_metadata, configurer) -> None:
        """Test hooks receive capture, selection and resolution events in order."""
        # Arrange
        hooks = Mock()
        resolver = CachingConfigurationResolver(hooks=hooks)

        # Act
        configuration = resolver.resolve(annotated_metadata, [configurer])

        # Assert
        assert [c[0] for c in hooks.method_calls] == [
            "on_metadata_captured",
            "on_configurer_selected",
            "on_resolved",
        ]
        hooks.on_configurer_selected.assert_called_once_with("app.config.CacheConfig", configurer)
        hooks.on_resolved.assert_called_once_with("app.config.CacheConfig", configuration)
        hooks.on_resolution_error.assert_not_called()

    def test_failure_notifies_error_once(self, annotated_metadata) -> None:
        """Test a failed transition reports the error exactly once."""
        # Arrange
        hooks = Mock()
        resolver = CachingConfigurationResolver(hooks=hooks)

        # Act
        with pytest.raises(AmbiguousConfigurerError) as exc_info:
            resolver.resolve(annotated_metadata, [Mock(), Mock()])

        # Assert
        hooks.on_resolution_error.assert_called_once_with("app.config.CacheConfig", exc_info.value)
        hooks.on_resolved.assert_not_called()

    @pytest.mark.parametrize("event", ["on_metadata_captured", "on_configurer_selected", "on_resolved"])
    def test_failing_hook_fails_resolution(self, annotated_metadata, event: str) -> None:
        """Test an error raised by a hook marks the resolution FAILED and is reported."""
        # Arrange
        error = RuntimeError("hook broke")
        hooks = Mock()
        getattr(hooks, event).side_effect = error
        resolver = CachingConfigurationResolver(hooks=hooks)

        # Act & Assert
        with pytest.raises(RuntimeError) as exc_info:
            resolver.resolve(annotated_metadata, [])

        assert exc_info.value is error
        assert resolver.state is ResolutionState.FAILED
        hooks.on_resolution_error.assert_called_once_with("app.config.CacheConfig", error)


class TestResolvedConfiguration:
    """Test ResolvedConfiguration data holder."""

    def test_created_empty(self) -> None:
        """Test a new configuration has no collaborators or attributes."""
        configuration = ResolvedConfiguration()

        _assert_unset(configuration)
        assert configuration.enable_attributes is None
        assert configuration.is_customized is False

    def test_options_require_captured_attributes(self) -> None:
        """Test options are unavailable before capture."""
        with pytest.raises(ConfigurationError, match="not been captured"):
            ResolvedConfiguration().options
