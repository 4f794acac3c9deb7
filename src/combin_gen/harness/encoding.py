"""
Encoding — ABI-кодирование ожидаемых revert data

Solidity откатывает транзакцию с Panic(uint256) при отказах checked
arithmetic и других runtime-проверок. Revert data: 4-байтовый селектор
функции, затем код panic как 32-байтовое big-endian слово.

Кодирование живёт только в harness: ядро оперирует FailureCategory.
"""

import re
from typing import Final

from combin_gen.core.domain.outcome import FailureCategory, Outcome


# =============================================================================
# PANIC(UINT256)
# =============================================================================

# keccak256("Panic(uint256)")[:4].hex()
PANIC_SELECTOR: Final[str] = "0x4e487b71"

PANIC_CODES: Final[dict[FailureCategory, int]] = {
    FailureCategory.ASSERTION: 0x01,
    FailureCategory.ARITHMETIC: 0x11,
    FailureCategory.DIVISION: 0x12,
    FailureCategory.ENUM_CONVERSION: 0x21,
    FailureCategory.ENCODE_STORAGE: 0x22,
    FailureCategory.POP: 0x31,
    FailureCategory.INDEX_OUT_OF_BOUNDS: 0x32,
    FailureCategory.MEMORY_OVERFLOW: 0x41,
    FailureCategory.ZERO_INITIALIZED_VARIABLE: 0x51,
}

# Пустые revert data для случаев, где отказ не ожидается
EMPTY_REVERT_DATA: Final[str] = "0x"

# 32-байтовое слово: ровно 64 hex-символа
_WORD_RE: Final[re.Pattern] = re.compile(r"[0-9a-f]{64}")


# =============================================================================
# ENCODE
# =============================================================================


def encode_panic_hex(category: FailureCategory) -> str:
    """
    Revert data Panic(uint256) в виде hex-строки с префиксом 0x.

    Args:
        category: Категория отказа

    Returns:
        PANIC_SELECTOR + код panic, дополненный нулями до 64 символов
    """
    code_padded = hex(PANIC_CODES[category])[2:].zfill(64)
    return PANIC_SELECTOR + code_padded


def encode_panic(category: FailureCategory) -> bytes:
    """Revert data Panic(uint256) в виде байтов (36 байт)."""
    return bytes.fromhex(encode_panic_hex(category)[2:])


def encode_outcome(outcome: Outcome) -> str:
    """Представление исхода в фикстуре: revert data panic или "0x" для успеха."""
    if isinstance(outcome, FailureCategory):
        return encode_panic_hex(outcome)
    return EMPTY_REVERT_DATA


# =============================================================================
# DECODE
# =============================================================================


def decode_panic_hex(data: str) -> FailureCategory:
    """
    Категория отказа по revert data Panic(uint256).

    Args:
        data: Hex-строка с префиксом 0x (регистр не важен)

    Returns:
        FailureCategory, соответствующая коду panic

    Raises:
        ValueError: Если данные не являются корректным payload Panic(uint256)
            или код panic неизвестен
    """
    body = data.lower()
    if not body.startswith(PANIC_SELECTOR):
        raise ValueError(f"Not Panic(uint256) revert data: {data}")

    word = body[len(PANIC_SELECTOR):]
    if not _WORD_RE.fullmatch(word):
        raise ValueError(f"Not Panic(uint256) revert data: {data}")

    code = int(word, 16)
    for category, known in PANIC_CODES.items():
        if known == code:
            return category
    raise ValueError(f"Unknown panic code: {code:#x}")
