"""Tests for internal API configuration."""
import pytest

from fluentreq import InternalApiConfig, ConfigurationError, parse_api_base, DEFAULT_PORTS


class TestParseApiBase:
    """Test suite for parse_api_base."""
    
    def test_https_with_path(self):
        """Test full https base."""
        base = parse_api_base('https://api.example.com/v1')
        
        assert base.scheme == 'https'
        assert base.host == 'api.example.com'
        assert base.port == 443
        assert base.path == '/v1'
    
    def test_http_default_port(self):
        """Test http defaults to 80."""
        assert parse_api_base('http://example.com/x').port == 80
    
    def test_explicit_port(self):
        """Test explicit port wins over default."""
        assert parse_api_base('https://example.com:8443/').port == 8443
    
    def test_host_and_scheme_lowercased(self):
        """Test host and scheme are normalized."""
        base = parse_api_base('HTTPS://API.Example.COM/V1')
        
        assert base.scheme == 'https'
        assert base.host == 'api.example.com'
        assert base.path == '/V1'
    
    def test_empty_path_is_slash(self):
        """Test http(s) base without path."""
        assert parse_api_base('https://example.com').path == '/'
    
    def test_unknown_scheme_without_port(self):
        """Test unknown scheme has no default port."""
        base = parse_api_base('ftp://files.example.com')
        
        assert base.port is None
        assert base.path == ''
    
    def test_ipv6_host_keeps_brackets(self):
        """Test IPv6 literal hosts stay bracketed."""
        base = parse_api_base('http://[::1]:8080/v1')
        
        assert base.host == '[::1]'
        assert base.port == 8080
        assert base.path == '/v1'
    
    def test_ipv6_default_port(self):
        """Test bracketed IPv6 host without explicit port."""
        base = parse_api_base('https://[2001:db8::1]/')
        
        assert base.host == '[2001:db8::1]'
        assert base.port == 443
    
    def test_query_is_ignored(self):
        """Test query string is not part of the path."""
        assert parse_api_base('https://example.com/v1?x=1').path == '/v1'
    
    @pytest.mark.parametrize('url', ['', '/v1', 'example.com', 'https://', None])
    def test_invalid_base(self, url):
        """Test non-absolute bases raise."""
        with pytest.raises(ConfigurationError):
            parse_api_base(url)
    
    def test_invalid_port(self):
        """Test out of range port raises."""
        with pytest.raises(ConfigurationError, match='Invalid port'):
            parse_api_base('https://example.com:99999/')
    
    def test_default_ports(self):
        """Test default port table."""
        assert DEFAULT_PORTS == {'http': 80, 'https': 443}


class TestInternalApiConfig:
    """Test suite for InternalApiConfig."""
    
    def test_defaults(self):
        """Test optional fields default."""
        config = InternalApiConfig(api_base='https://a.example.com', api_key='k')
        
        assert config.api_path_prefix == ''
        assert config.wait_for is None
        assert config.no_cache is False
        assert config.no_queue is False
    
    def test_headers_minimal(self):
        """Test only the API key header by default."""
        config = InternalApiConfig(api_base='https://a.example.com', api_key='k')
        
        assert config.to_headers() == {'x-api-key': 'k'}
    
    @pytest.mark.parametrize('wait_for,expected', [(5, '5'), (0, '0'), (2.5, '2.5'), (3.0, '3')])
    def test_wait_for_header(self, wait_for, expected):
        """Test numeric wait_for is stringified."""
        config = InternalApiConfig(api_base='https://a.example.com', api_key='k', wait_for=wait_for)
        
        assert config.to_headers()['x-wait-for'] == expected
    
    @pytest.mark.parametrize('wait_for,expected', [
        (float('inf'), 'Infinity'),
        (float('-inf'), '-Infinity'),
        (float('nan'), 'NaN'),
    ])
    def test_non_finite_wait_for_header(self, wait_for, expected):
        """Test non-finite wait_for renders like JavaScript."""
        config = InternalApiConfig(api_base='https://a.example.com', api_key='k', wait_for=wait_for)
        
        assert config.to_headers()['x-wait-for'] == expected
    
    def test_bool_wait_for_ignored(self):
        """Test booleans are not treated as numbers."""
        config = InternalApiConfig(api_base='https://a.example.com', api_key='k', wait_for=True)
        
        assert 'x-wait-for' not in config.to_headers()
    
    def test_from_dict_camel_case(self, internal_api_config):
        """Test camelCase keys."""
        internal_api_config.update(waitFor=1, noCache=True)
        config = InternalApiConfig.from_dict(internal_api_config)
        
        assert config.api_base == 'https://api.example.com/v1'
        assert config.api_path_prefix == '/widgets'
        assert config.api_key == 'k'
        assert config.wait_for == 1
        assert config.no_cache is True
        assert config.no_queue is False
    
    def test_from_dict_snake_case(self):
        """Test snake_case alternative keys."""
        config = InternalApiConfig.from_dict({
            'api_base': 'http://localhost:8080',
            'api_key': 'k',
            'no_queue': True,
        })
        
        assert config.api_base == 'http://localhost:8080'
        assert config.api_path_prefix == ''
        assert config.no_queue is True
    
    def test_from_dict_missing_key(self):
        """Test missing apiKey raises."""
        with pytest.raises(ConfigurationError, match='apiKey'):
            InternalApiConfig.from_dict({'apiBase': 'https://a.example.com'})
