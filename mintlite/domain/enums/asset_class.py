"""Asset class enumeration.

Classification of a holding's underlying security. Stored as the lowercase
string value.
"""

from enum import Enum


class AssetClass(str, Enum):
    """Kind of security a holding represents.

    Examples:
        >>> AssetClass("etf")
        <AssetClass.ETF: 'etf'>
    """

    STOCK = "stock"  # Common/preferred equity
    ETF = "etf"  # Exchange-traded funds
    CRYPTO = "crypto"  # Crypto assets
    BOND = "bond"  # Bonds, treasuries
    MUTUAL_FUND = "mutual_fund"
    OTHER = "other"
