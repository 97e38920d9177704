import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional


class TestDataLoader:
    """
    Signup and login request payloads from test_data.json.

    payload() hands out a fresh copy with overrides applied; for_draft()
    additionally fills in the signup token and the step 1 credentials, as
    steps 2 and 3 require.
    """

    __test__ = False

    _data: Optional[Dict[str, Any]] = None

    @classmethod
    def _raw(cls) -> Dict[str, Any]:
        if cls._data is None:
            with open(Path(__file__).parent / "test_data.json") as f:
                cls._data = json.load(f)
        return cls._data

    def payload(self, key: str, **overrides: Any) -> Dict[str, Any]:
        data = copy.deepcopy(self._raw()[key])
        data.update(overrides)
        return data

    def credentials(self) -> Dict[str, str]:
        step1 = self._raw()["step1"]
        return {"email": step1["email"], "password": step1["password"]}

    def for_draft(self, key: str, signup_token: str, **overrides: Any) -> Dict[str, Any]:
        return self.payload(key, signup_token=signup_token, **{**self.credentials(), **overrides})
