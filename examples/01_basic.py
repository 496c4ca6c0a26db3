"""
Basic usage - Fetch a client with full details
"""
from mambupy import MambuClient, APIConfig, ParamsMap


def main():
    # Reads MAMBU_DOMAIN, MAMBU_USERNAME, MAMBU_PASSWORD and MAMBU_APP_KEY
    mambu = MambuClient(APIConfig.from_env())
    
    params = ParamsMap().add_param("fullDetails", "true")
    body = mambu.get("clients/123", params)
    print(f"Client: {body}")


if __name__ == "__main__":
    main()
