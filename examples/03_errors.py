"""
Handling failures - exceptions and results
"""
from datetime import date

from mambupy import (
    MambuClient,
    APIConfig,
    ApiFailure,
    HttpStatusError,
    TransportError,
    ParamsMap,
)


def main():
    mambu = MambuClient(APIConfig.from_env())
    
    # 1. Exceptions
    try:
        mambu.get("clients/unknown")
    except HttpStatusError as e:
        print(f"HTTP {e.status_code}: {e.body}")
    except TransportError as e:
        print(f"Network problem: {e.cause}")
    
    # 2. Results
    params = ParamsMap().add_date_param("from", date(2024, 1, 1)).add_param("limit", "10")
    result = mambu.execute("loans/LN1/transactions", params)
    if isinstance(result, ApiFailure):
        if result.is_transport_error:
            print(f"Network problem: {result.error.cause}")
        else:
            print(f"HTTP {result.status_code}: {result.body}")
    else:
        print(result.body)


if __name__ == "__main__":
    main()
