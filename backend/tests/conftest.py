"""
Shared fixtures for vPIC lookup backend tests.
"""
import pytest
import sys
import os

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Keep tests independent of a developer's .env
os.environ.setdefault("EMPTY_ATTRIBUTE_POLICY", "zero")


@pytest.fixture
def ford_elements():
    """DecodeVinValues result for a cleanly decoded VIN."""
    return {
        "Make": "FORD",
        "MakeId": "460",
        "Model": "F-150",
        "ModelId": "1801",
        "ModelYear": "2020",
        "ErrorCode": "0",
        "ErrorText": "0 - VIN decoded clean. Check Digit (9th position) is correct",
        "ErrorCodeId": "",
        "SuggestedVIN": "",
        "PossibleValues": "",
        "AdditionalErrorText": "",
        "BodyClass": "Pickup",
        "Doors": "4",
        "DisplacementL": "3.5",
        "Transmission Style": "Automatic",
        "EngineHP": "",
    }


@pytest.fixture
def incomplete_vin_elements():
    """DecodeVinValues result when vPIC could not identify the vehicle."""
    return {
        "Make": "",
        "MakeId": "",
        "Model": "",
        "ModelId": "",
        "ModelYear": "",
        "ErrorCode": "6",
        "ErrorText": "6 - Incomplete VIN",
        "SuggestedVIN": "",
    }
