"""
Tests for the resolution chain and the request-scoped language context

Precedence is custom → URL → Accept-Language → wildcard. Unconfigured
sources are transparent; each configured failure replaces the error that is
finally reported.
"""

import asyncio

import pytest

from fastapi_lang.config import Settings
from fastapi_lang.exceptions import BadRequestError, NotAcceptableError, NotFoundError
from fastapi_lang.i18n.catalog import LangCode
from fastapi_lang.negotiation import CustomResolver, LanguageConfig, LanguageContext
from utils.mock_utils import make_request


class TestLanguageConfig:
    def test_defaults(self):
        config = LanguageConfig()
        assert config.wildcard_lang is None
        assert config.url_position is None
        assert config.custom_resolver is None
        assert len(config.weights) == len(LangCode)
        assert all(weight == 0.0 for weight in config.weights.values())

    def test_weight_indexing(self):
        config = LanguageConfig()
        config[LangCode.EN] = 0.3
        config["ar"] = 1
        assert config[LangCode.EN] == 0.3
        assert config["en"] == 0.3
        assert config[LangCode.AR] == 1.0
        assert isinstance(config[LangCode.AR], float)

    def test_unknown_code_raises_value_error(self):
        config = LanguageConfig()
        with pytest.raises(ValueError, match="xx"):
            config["xx"] = 1.0
        with pytest.raises(ValueError, match="xx"):
            config["xx"]
        with pytest.raises(ValueError, match="xx"):
            config.wildcard("xx")

    def test_builder_leaves_receiver_untouched(self):
        base = LanguageConfig()
        base[LangCode.ES] = 1.0
        derived = base.url(-1).wildcard(LangCode.DE)
        derived[LangCode.FR] = 1.0

        assert base.url_position is None
        assert base.wildcard_lang is None
        assert base[LangCode.FR] == 0.0
        assert derived.url_position == -1
        assert derived.wildcard_lang is LangCode.DE
        assert derived[LangCode.ES] == 1.0

    def test_wildcard_accepts_code_string(self):
        assert LanguageConfig().wildcard("pt").wildcard_lang is LangCode.PT
        with pytest.raises(ValueError):
            LanguageConfig().wildcard("xx")

    def test_supported(self):
        config = LanguageConfig()
        config[LangCode.EN] = 0.5
        config[LangCode.DE] = float("nan")
        assert dict(config.supported()) == {LangCode.EN: 0.5}

    def test_from_settings(self):
        settings = Settings(language_wildcard="de", language_url_position=-1, language_weights={"es": 1.0})
        config = LanguageConfig.from_settings(settings)
        assert config.wildcard_lang is LangCode.DE
        assert config.url_position == -1
        assert config[LangCode.ES] == 1.0
        assert config[LangCode.EN] == 0.0

    def test_from_empty_settings(self):
        config = LanguageConfig.from_settings(
            Settings(language_wildcard=None, language_url_position=None, language_weights={})
        )
        assert config.wildcard_lang is None
        assert config.url_position is None
        assert list(config.supported()) == []


class TestCustomResolver:
    @pytest.mark.asyncio
    async def test_sync_variant(self):
        resolver = CustomResolver(lambda request: LangCode.LA)
        assert resolver.is_async is False
        assert await resolver(make_request()) is LangCode.LA

    @pytest.mark.asyncio
    async def test_async_variant(self):
        async def lookup(request):
            await asyncio.sleep(0)
            return LangCode.JA

        resolver = CustomResolver(lookup)
        assert resolver.is_async is True
        assert await resolver(make_request()) is LangCode.JA

    @pytest.mark.asyncio
    async def test_code_string_is_parsed(self):
        assert await CustomResolver(lambda request: "pt")(make_request()) is LangCode.PT
        with pytest.raises(NotAcceptableError):
            await CustomResolver(lambda request: "xx")(make_request())

    @pytest.mark.asyncio
    async def test_sync_callable_returning_awaitable(self):
        async def lookup():
            return LangCode.KO

        resolver = CustomResolver(lambda request: lookup())
        assert resolver.is_async is False
        assert await resolver(make_request()) is LangCode.KO

    @pytest.mark.asyncio
    async def test_receives_the_request(self):
        seen = []

        def resolver(request):
            seen.append(request.url.path)
            return LangCode.EN

        await CustomResolver(resolver)(make_request("/a/b"))
        assert seen == ["/a/b"]


class TestResolutionChain:
    @pytest.mark.asyncio
    async def test_url_header_wildcard_precedence(self):
        config = LanguageConfig().url(-1).wildcard(LangCode.DE)
        config[LangCode.ES] = 1.0

        assert await config.choose(make_request("/some/bad/path", "en")) is LangCode.DE
        assert await config.choose(make_request("/some/bad/path", "es")) is LangCode.ES
        assert await config.choose(make_request("/some-good/path/pt", "es")) is LangCode.PT
        assert await config.choose(make_request("/some/bad/path", "not a valid header")) is LangCode.DE
        assert await config.choose(make_request("/some/bad/path", "")) is LangCode.DE

    @pytest.mark.asyncio
    async def test_custom_override_wins(self):
        config = LanguageConfig().custom(lambda request: LangCode.LA)
        for path, header in [("/some/bad/path", "en"), ("/some/bad/path", "es"), ("/some-good/path/pt", "es")]:
            assert await config.choose(make_request(path, header)) is LangCode.LA

    @pytest.mark.asyncio
    async def test_failing_custom_falls_through(self):
        def not_found(request):
            raise NotFoundError()

        config = LanguageConfig().url(-1).wildcard(LangCode.DE).custom(not_found)
        config[LangCode.ES] = 1.0

        assert await config.choose(make_request("/some/bad/path", "en")) is LangCode.DE
        assert await config.choose(make_request("/some/bad/path", "es")) is LangCode.ES
        assert await config.choose(make_request("/some-good/path/pt", "es")) is LangCode.PT

    @pytest.mark.asyncio
    async def test_async_custom_falls_through(self):
        async def not_found(request):
            await asyncio.sleep(0)
            raise NotFoundError()

        config = LanguageConfig().custom(not_found)
        config[LangCode.ES] = 1.0
        assert await config.choose(make_request("/", "es")) is LangCode.ES

    @pytest.mark.asyncio
    async def test_url_then_header(self):
        config = LanguageConfig().url(-1)
        config[LangCode.ES] = 1.0
        assert await config.choose(make_request("/some/bad/path", "en,es;q=0.1")) is LangCode.ES
        assert await config.choose(make_request("/some/bad/la", "en,es;q=0.1")) is LangCode.LA

    @pytest.mark.asyncio
    async def test_header_only_failure_is_not_acceptable(self):
        with pytest.raises(NotAcceptableError):
            await LanguageConfig().choose(make_request("/", "en"))

    @pytest.mark.asyncio
    async def test_last_configured_error_is_reported(self):
        # URL fails with NotFound, then the header fails with NotAcceptable
        config = LanguageConfig().url(-1)
        with pytest.raises(NotAcceptableError):
            await config.choose(make_request("/some/bad/path", "en"))

    @pytest.mark.asyncio
    async def test_custom_error_is_replaced_by_header_error(self):
        def bad_request(request):
            raise BadRequestError()

        config = LanguageConfig().custom(bad_request)
        with pytest.raises(NotAcceptableError):
            await config.choose(make_request("/", "xx"))

    @pytest.mark.asyncio
    async def test_wildcard_masks_every_error(self):
        def bad_request(request):
            raise BadRequestError()

        config = LanguageConfig().custom(bad_request).url(0).wildcard(LangCode.SV)
        assert await config.choose(make_request("/nope", "garbage")) is LangCode.SV

    @pytest.mark.asyncio
    async def test_missing_header_uses_en(self):
        config = LanguageConfig()
        config[LangCode.EN] = 0.1
        assert await config.choose(make_request("/")) is LangCode.EN

    @pytest.mark.asyncio
    async def test_unexpected_resolver_errors_propagate(self):
        def broken(request):
            raise RuntimeError("lookup failed")

        config = LanguageConfig().custom(broken).wildcard(LangCode.EN)
        with pytest.raises(RuntimeError):
            await config.choose(make_request("/"))

    @pytest.mark.asyncio
    async def test_cancellation_reaches_custom_resolver(self):
        started = asyncio.Event()
        cancelled = []

        async def slow(request):
            started.set()
            try:
                await asyncio.Event().wait()
            except asyncio.CancelledError:
                cancelled.append(True)
                raise

        config = LanguageConfig().custom(slow).wildcard(LangCode.EN)
        task = asyncio.create_task(config.choose(make_request("/")))
        await started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert cancelled == [True]

    @pytest.mark.asyncio
    async def test_concurrent_requests_are_independent(self):
        async def by_path(request):
            await asyncio.sleep(0)
            return request.url.path.strip("/")

        config = LanguageConfig().custom(by_path)
        paths = ["/de", "/fr", "/es", "/pt"]
        results = await asyncio.gather(*(config.choose(make_request(path)) for path in paths))
        assert results == [LangCode.DE, LangCode.FR, LangCode.ES, LangCode.PT]


class TestLanguageContext:
    @staticmethod
    def _counting_config(result):
        calls = []

        async def resolver(request):
            calls.append(request)
            if isinstance(result, Exception):
                raise result
            return result

        return LanguageConfig().custom(resolver), calls

    @pytest.mark.asyncio
    async def test_resolves_once(self):
        config, calls = self._counting_config(LangCode.FI)
        context = LanguageContext(config)
        request = make_request("/")

        assert context.resolved is False
        assert context.language is None
        assert await context.resolve(request) is LangCode.FI
        assert await context.resolve(request) is LangCode.FI
        assert len(calls) == 1
        assert context.resolved is True
        assert context.language is LangCode.FI

    @pytest.mark.asyncio
    async def test_error_is_memoized(self):
        config, calls = self._counting_config(NotFoundError())
        context = LanguageContext(config)
        request = make_request("/", "xx")

        for _ in range(2):
            with pytest.raises(NotAcceptableError):
                await context.resolve(request)
        assert len(calls) == 1
        assert context.resolved is True
        assert context.language is None

    @pytest.mark.asyncio
    async def test_concurrent_lookups_share_one_resolution(self):
        config, calls = self._counting_config(LangCode.NL)
        context = LanguageContext(config)
        request = make_request("/")

        results = await asyncio.gather(*(context.resolve(request) for _ in range(5)))
        assert results == [LangCode.NL] * 5
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_fresh_context_per_request(self):
        config, calls = self._counting_config(LangCode.NL)
        await LanguageContext(config).resolve(make_request("/"))
        await LanguageContext(config).resolve(make_request("/"))
        assert len(calls) == 2
