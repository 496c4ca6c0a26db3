"""
Async usage - Several GETs at once
"""
import asyncio

from mambupy import APIConfig, AsyncRequestExecutor, HttpMethod


async def main():
    config = APIConfig.from_env()
    executor = AsyncRequestExecutor(config)
    
    paths = ["branches", "centres", "users"]
    results = await asyncio.gather(*(
        executor.execute(config.api_url(path), {"limit": "5"}, HttpMethod.GET)
        for path in paths
    ))
    
    for path, result in zip(paths, results):
        status = result.status_code if result.ok else f"failed ({result.error})"
        print(f"{path}: {status}")


if __name__ == "__main__":
    asyncio.run(main())
