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

from typing import List, Literal, Optional

from ..base import TelegramType


class PassportFile(TelegramType):
    file_id: str
    file_unique_id: str
    file_size: int
    file_date: int


class EncryptedPassportElement(TelegramType):
    # "personal_details", "passport", "driver_license", "identity_card", "internal_passport", "address",
    # "utility_bill", "bank_statement", "rental_agreement", "passport_registration", "temporary_registration",
    # "phone_number" or "email"
    type: str
    data: Optional[str]
    phone_number: Optional[str]
    email: Optional[str]
    files: Optional[List[PassportFile]]
    front_side: Optional[PassportFile]
    reverse_side: Optional[PassportFile]
    selfie: Optional[PassportFile]
    translation: Optional[List[PassportFile]]
    hash: str


class EncryptedCredentials(TelegramType):
    data: str
    hash: str
    secret: str


class PassportData(TelegramType):
    data: List[EncryptedPassportElement]
    credentials: EncryptedCredentials


# ===================
# ERRORS
#
# sent with setPassportDataErrors, "type" is the type of the element with the error

class PassportElementError(TelegramType, discriminator="source"):
    pass


class PassportElementErrorDataField(PassportElementError):
    source: Literal["data"]
    type: str
    field_name: str
    data_hash: str
    message: str


class PassportElementErrorFrontSide(PassportElementError):
    source: Literal["front_side"]
    type: str
    file_hash: str
    message: str


class PassportElementErrorReverseSide(PassportElementError):
    source: Literal["reverse_side"]
    type: str
    file_hash: str
    message: str


class PassportElementErrorSelfie(PassportElementError):
    source: Literal["selfie"]
    type: str
    file_hash: str
    message: str


class PassportElementErrorFile(PassportElementError):
    source: Literal["file"]
    type: str
    file_hash: str
    message: str


class PassportElementErrorFiles(PassportElementError):
    source: Literal["files"]
    type: str
    file_hashes: List[str]
    message: str


class PassportElementErrorTranslationFile(PassportElementError):
    source: Literal["translation_file"]
    type: str
    file_hash: str
    message: str


class PassportElementErrorTranslationFiles(PassportElementError):
    source: Literal["translation_files"]
    type: str
    file_hashes: List[str]
    message: str


class PassportElementErrorUnspecified(PassportElementError):
    source: Literal["unspecified"]
    type: str
    element_hash: str
    message: str
