import os
import time

import requests
from requests.auth import HTTPBasicAuth


def fetch_species(api_url, username, password):
    """
    Fetches the species collection using Basic Authentication.

    Parameters:
        api_url (str): Base URL of the API, e.g. http://localhost:8000/api/v1
        username (str): The username for Basic Authentication.
        password (str): The password for Basic Authentication.

    Returns:
        list: The species records, or None when the request failed.
    """
    start_time = time.time()
    response = requests.get(
        f"{api_url}/species/", auth=HTTPBasicAuth(username, password)
    )
    response_time = time.time() - start_time

    if response.status_code != 200:
        print(f"Failed to fetch species. HTTP Status Code: {response.status_code}")
        print("Response:", response.text)
        return None

    print(f"Total response time: {response_time:.2f} seconds")
    return response.json()


def edit_species(api_url, username, password, species_id, **fields):
    """
    Updates some fields of a species the user has created.

    Blank common_name/description/image are stored as null, the response
    contains the normalized record.

    Returns:
        dict: The updated species, or None when the request failed.
    """
    response = requests.patch(
        f"{api_url}/species/{species_id}/",
        json=fields,
        auth=HTTPBasicAuth(username, password)
    )
    if response.status_code == 400:
        print("Invalid values:", response.json())
        return None
    if response.status_code == 403:
        print("You must be the creator of this species.")
        return None
    if response.status_code != 200:
        print(f"Failed to edit species. HTTP Status Code: {response.status_code}")
        return None
    return response.json()


# Example usage
if __name__ == "__main__":
    api_url = os.environ.get("HUB_API_URL", "http://localhost:8000/api/v1")

    # Set your username and password
    username = os.environ.get("HUB_USERNAME", "")
    password = os.environ.get("HUB_PASSWORD", "")

    species_list = fetch_species(api_url, username, password)
    if species_list:
        for species in species_list:
            print(
                f"{species['id']}: {species['scientific_name']} "
                f"({species['common_name'] or '-'}) by {species['author_username']}"
            )

        species = species_list[0]
        updated = edit_species(
            api_url, username, password, species['id'],
            common_name="  ", total_population=species['total_population']
        )
        if updated:
            print("Updated:", updated)
