"""
Execution - Run a request through a transport with a callback or a future
"""
import asyncio
import logging
import threading

import fluentreq


def fake_transport(request, callback):
    """Pretends to send the request from a worker thread."""
    def worker():
        if request.path == '/missing':
            callback(fluentreq.TransportError('HTTP 404', error_code=404), None)
        else:
            callback(None, {'status': 200, 'url': request.get_url()})
    
    threading.Thread(target=worker).start()


async def main():
    logging.basicConfig(level=logging.DEBUG)
    fluentreq.setup_logging(logging.DEBUG)
    
    base = (fluentreq.builder()
            .with_scheme('https')
            .with_host('api.example.com')
            .with_port(443))
    
    # Callback style
    done = threading.Event()
    
    def on_done(error, result):
        print(f"callback: error={error!r} result={result!r}")
        done.set()
    
    base.with_path('/me').build().execute(fake_transport, on_done)
    done.wait()
    
    # Future style
    result = await base.with_path('/me').build().execute(fake_transport)
    print(f"future: {result}")
    
    try:
        await base.with_path('/missing').build().execute_async(fake_transport)
    except fluentreq.TransportError as e:
        print(f"failed: {e} (code {e.error_code})")


if __name__ == "__main__":
    asyncio.run(main())
