_WHITESPACE = "\n\t \r"

def str_trim(input: str) -> str:
    return input.strip(_WHITESPACE)

def is_str_empty(input: str) -> bool:
    return input == ""

def subdomain_of(domains: list[str], host: str) -> bool:
    # strict subdomain; host equal to a domain does not count
    for domain in domains:
        if host.endswith("." + domain):
            return True

    return False
