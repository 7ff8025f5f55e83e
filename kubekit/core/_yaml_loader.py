from typing import Any

import yaml


class YamlLoader:
    @staticmethod
    def load(path: str) -> dict[str, Any]:
        with open(path, "r") as file:
            obj = yaml.safe_load(file)
        return obj if obj is not None else {}
