"""
Basic usage - Build a request and render its URL
"""
import fluentreq


def main():
    request = (fluentreq.builder()
               .with_scheme('https')
               .with_host('api.example.com')
               .with_port(443)
               .with_path_prefix('/v1')
               .with_path('/search')
               .with_query_parameters({'q': 'jazz', 'type': 'album'}, {'limit': 20})
               .with_headers({'Accept': 'application/json'})
               .with_auth('my-access-token')
               .build())
    
    print(f"URI:     {request.get_uri()}")
    print(f"URL:     {request.get_url()}")
    print(f"Headers: {request.headers}")


if __name__ == "__main__":
    main()
