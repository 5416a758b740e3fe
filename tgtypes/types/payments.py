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

import yarl

from ..base import TelegramType
from .chat import Chat, User
from .media import PaidMedia, Sticker


class LabeledPrice(TelegramType):
    label: str
    # in the smallest units of the currency
    amount: int


class Invoice(TelegramType):
    title: str
    description: str
    start_parameter: str
    # three-letter ISO 4217 code, "XTR" for Telegram Stars
    currency: str
    total_amount: int


class ShippingAddress(TelegramType):
    country_code: str
    state: str
    city: str
    street_line1: str
    street_line2: str
    post_code: str


class OrderInfo(TelegramType):
    name: Optional[str]
    phone_number: Optional[str]
    email: Optional[str]
    shipping_address: Optional[ShippingAddress]


class ShippingOption(TelegramType):
    id: str
    title: str
    prices: List[LabeledPrice]


class SuccessfulPayment(TelegramType):
    currency: str
    total_amount: int
    invoice_payload: str
    subscription_expiration_date: Optional[int]
    is_recurring: Optional[Literal[True]]
    is_first_recurring: Optional[Literal[True]]
    shipping_option_id: Optional[str]
    order_info: Optional[OrderInfo]
    telegram_payment_charge_id: str
    provider_payment_charge_id: str


class RefundedPayment(TelegramType):
    currency: Literal["XTR"]
    total_amount: int
    invoice_payload: str
    telegram_payment_charge_id: str
    provider_payment_charge_id: Optional[str]


class ShippingQuery(TelegramType):
    id: str
    from_: User
    invoice_payload: str
    shipping_address: ShippingAddress


class PreCheckoutQuery(TelegramType):
    id: str
    from_: User
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str]
    order_info: Optional[OrderInfo]


class PaidMediaPurchased(TelegramType):
    from_: User
    paid_media_payload: str


# ===================
# GIFTS

class Gift(TelegramType):
    id: str
    sticker: Sticker
    star_count: int
    upgrade_star_count: Optional[int]
    total_count: Optional[int]
    remaining_count: Optional[int]


class Gifts(TelegramType):
    gifts: List[Gift]


# ===================
# TELEGRAM STARS

class RevenueWithdrawalState(TelegramType, discriminator="type"):
    pass


class RevenueWithdrawalStatePending(RevenueWithdrawalState):
    type: Literal["pending"]


class RevenueWithdrawalStateSucceeded(RevenueWithdrawalState):
    type: Literal["succeeded"]
    date: int
    url: yarl.URL


class RevenueWithdrawalStateFailed(RevenueWithdrawalState):
    type: Literal["failed"]


class AffiliateInfo(TelegramType):
    affiliate_user: Optional[User]
    affiliate_chat: Optional[Chat]
    commission_per_mille: int
    amount: int
    nanostar_amount: Optional[int]


class TransactionPartner(TelegramType, discriminator="type"):
    pass


class TransactionPartnerUser(TransactionPartner):
    type: Literal["user"]
    user: User
    affiliate: Optional[AffiliateInfo]
    invoice_payload: Optional[str]
    subscription_period: Optional[int]
    paid_media: Optional[List[PaidMedia]]
    paid_media_payload: Optional[str]
    gift: Optional[Gift]


class TransactionPartnerChat(TransactionPartner):
    type: Literal["chat"]
    chat: Chat
    gift: Optional[Gift]


class TransactionPartnerAffiliateProgram(TransactionPartner):
    type: Literal["affiliate_program"]
    sponsor_user: Optional[User]
    commission_per_mille: int


class TransactionPartnerFragment(TransactionPartner):
    type: Literal["fragment"]
    withdrawal_state: Optional[RevenueWithdrawalState]


class TransactionPartnerTelegramAds(TransactionPartner):
    type: Literal["telegram_ads"]


class TransactionPartnerTelegramApi(TransactionPartner):
    type: Literal["telegram_api"]
    request_count: int


class TransactionPartnerOther(TransactionPartner):
    type: Literal["other"]


class StarTransaction(TelegramType):
    id: str
    amount: int
    nanostar_amount: Optional[int]
    date: int
    source: Optional[TransactionPartner]
    receiver: Optional[TransactionPartner]


class StarTransactions(TelegramType):
    transactions: List[StarTransaction]
