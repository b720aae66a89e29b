import ssl

import certifi

from plaud.infrastructure.http.tls import MINIMUM_TLS_VERSION, TLSAdapter, create_tls_context


class TestTlsContext:

    def test_minimum_version_is_tls_1_2(self):
        context = create_tls_context()

        assert MINIMUM_TLS_VERSION == ssl.TLSVersion.TLSv1_2
        assert context.minimum_version == ssl.TLSVersion.TLSv1_2

    def test_verifies_certificates(self):
        context = create_tls_context(cafile=certifi.where())

        assert context.verify_mode == ssl.CERT_REQUIRED
        assert context.check_hostname is True


class TestTlsAdapter:

    def test_pool_manager_uses_context(self):
        context = create_tls_context()
        adapter = TLSAdapter(ssl_context=context)

        assert adapter.ssl_context is context
        assert adapter.poolmanager.connection_pool_kw["ssl_context"] is context

    def test_default_context_created(self):
        adapter = TLSAdapter()
        assert adapter.ssl_context.minimum_version == ssl.TLSVersion.TLSv1_2
