#  tgtypes
#  Copyright (C) 2019-2021  Florian Rädiker
#
#  This program is free software: you can redistribute it and/or modify
#  it under the terms of the GNU Affero General Public License as published
#  by the Free Software Foundation, either version 3 of the License, or
#  (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU Affero General Public License for more details.
#
#  You should have received a copy of the GNU Affero General Public License
#  along with this program.  If not, see <https://www.gnu.org/licenses/>.

import logging
from functools import lru_cache
from typing import Tuple, Type

from pydantic import field_validator
from pydantic_settings import (BaseSettings, JsonConfigSettingsSource, PydanticBaseSettingsSource,
                               SettingsConfigDict)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TGTYPES_", json_file="tgtypes.json", frozen=True)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            JsonConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    # raise MissingFieldError when a required field is unset at normalization time, otherwise emit null
    require_fields: bool = True
    check_field_groups: bool = True
    # raise UnknownFieldError for undeclared keys while decoding, otherwise drop them with a warning
    forbid_unknown_fields: bool = True

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v):
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f'Invalid log level "{v}"')
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
