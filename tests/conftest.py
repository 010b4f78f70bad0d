import os

import pandas as pd
import pytest

from io_utils.readers import load_datasets

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")


@pytest.fixture
def sample_tables():
    return load_datasets(DATA_DIR)


@pytest.fixture
def acme_accounts():
    return pd.DataFrame([{
        "Company Name": "Acme",
        "Industry": "Construction",
        "Lifecycle Stage": "SQL",
        "Application Status": "Approved",
    }])


@pytest.fixture
def acme_calls():
    return pd.DataFrame([{
        "Company Name": "Acme",
        "Dials": "10",
        "Connects": "4",
        "Conversations": "3",
        "Meetings Set": "2",
    }])
