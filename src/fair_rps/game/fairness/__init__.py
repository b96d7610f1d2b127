"""
公平性协议模块
Fairness Protocol Module
"""
from .crypto_provider import CryptoProvider, DEFAULT_ALGORITHM
from .commitment import Commitment, FairnessProtocol, Revelation, DEFAULT_KEY_LENGTH

__all__ = [
    'CryptoProvider',
    'DEFAULT_ALGORITHM',
    'Commitment',
    'FairnessProtocol',
    'Revelation',
    'DEFAULT_KEY_LENGTH'
]
