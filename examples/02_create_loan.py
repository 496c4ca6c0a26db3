"""
POST a form with an application key
"""
from mambupy import MambuClient, APIConfig, ParamsMap


def main():
    config = APIConfig.from_env().with_application_key("myapp")
    mambu = MambuClient(config)
    
    # Sent as accountHolderKey=...&loanAmount=...&appkey=myapp
    params = (
        ParamsMap()
        .add_param("accountHolderKey", "8a33ae")
        .add_param("loanAmount", "1500")
        .add_param("notes", None)  # omitted
    )
    body = mambu.post("loans", params)
    print(f"Created: {body}")


if __name__ == "__main__":
    main()
