"""
Internal API - Configure host, port, prefix and API key headers in one call
"""
import fluentreq
from fluentreq import InternalApiConfig


def main():
    # Plain mapping, camelCase keys
    request = (fluentreq.builder()
               .with_internal_api({
                   'apiBase': 'https://internal.example.com/api',
                   'apiPathPrefix': '/widgets',
                   'apiKey': 'secret',
                   'waitFor': 30,
                   'noCache': True,
               })
               .with_path('/42')
               .build())
    
    print(f"URL:     {request.get_url()}")
    print(f"Headers: {request.headers}")
    
    # Dataclass configuration
    config = InternalApiConfig(
        api_base='http://localhost:8080/',
        api_key='dev-key',
        api_path_prefix='v2',
        no_queue=True
    )
    request = fluentreq.builder().with_internal_api(config).build()
    
    print(f"URL:     {request.get_url()}")
    print(f"Headers: {request.headers}")


if __name__ == "__main__":
    main()
