"""
配置加载工具模块
Configuration Loader Utility
"""
import copy
import hashlib
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from .exceptions import ConfigurationException
from .logger import setup_logger

logger = setup_logger("FairRPS.ConfigLoader")

DEFAULT_CONFIG: Dict[str, Any] = {
    'game': {
        'rounds': 1,
        'help_token': '?',
        'exit_token': 0,
    },
    'fairness': {
        'key_length': 32,
        'digest_algorithm': 'sha3_256',
        'verification_url': 'https://www.lddgo.net/en/encrypt/hmac',
    },
    'logging': {
        'level': 'WARNING',
        'file': None,
    },
}


class ConfigLoader:
    """配置加载器类"""

    @staticmethod
    def default_config_path() -> Path:
        """项目根目录下的 config/config.yaml"""
        return Path(__file__).resolve().parent.parent.parent.parent / "config" / "config.yaml"

    @staticmethod
    def load_config(config_path: str) -> Dict[str, Any]:
        """
        从YAML文件加载配置

        Args:
            config_path: 配置文件路径

        Returns:
            Dict[str, Any]: 配置字典

        Raises:
            FileNotFoundError: 配置文件不存在
            ConfigurationException: YAML解析错误或顶层不是映射
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise FileNotFoundError(f"配置文件不存在: {config_path}")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML解析错误: {e}")
            raise ConfigurationException(f"Cannot parse {config_path}: {e}") from e

        if config is None:
            logger.warning(f"配置文件为空: {config_path}")
            return {}

        if not isinstance(config, dict):
            raise ConfigurationException(
                f"Top level of {config_path} must be a mapping", config_key="<root>")

        logger.info(f"成功加载配置文件: {config_path}")
        return config

    @staticmethod
    def load_or_default(config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        加载配置并补全默认值

        显式指定的路径必须存在；默认路径缺失时直接使用内置默认配置。

        Args:
            config_path: 配置文件路径（可选）

        Returns:
            Dict[str, Any]: 校验后的完整配置
        """
        if config_path is not None:
            try:
                config = ConfigLoader.load_config(config_path)
            except FileNotFoundError as e:
                raise ConfigurationException(str(e), config_key="--config") from e
        else:
            default_path = ConfigLoader.default_config_path()
            if default_path.exists():
                config = ConfigLoader.load_config(str(default_path))
            else:
                logger.debug("未找到默认配置文件，使用内置默认配置")
                config = {}

        merged = ConfigLoader.merge_defaults(config)
        ConfigLoader.validate(merged)
        return merged

    @staticmethod
    def merge_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        用默认配置补全缺失的键

        Args:
            config: 用户配置字典

        Returns:
            Dict[str, Any]: 合并后的新字典
        """
        merged = copy.deepcopy(DEFAULT_CONFIG)
        for section, values in config.items():
            if isinstance(values, dict) and isinstance(merged.get(section), dict):
                merged[section].update(values)
            else:
                merged[section] = values
        return merged

    @staticmethod
    def validate(config: Dict[str, Any]):
        """
        校验配置取值

        Raises:
            ConfigurationException: 取值非法
        """
        for section in ('game', 'fairness', 'logging'):
            if not isinstance(config.get(section), dict):
                raise ConfigurationException(
                    f"Section '{section}' must be a mapping", config_key=section)

        game = config['game']
        fairness = config['fairness']

        rounds = game.get('rounds')
        if not isinstance(rounds, int) or isinstance(rounds, bool) or rounds < 1:
            raise ConfigurationException(
                f"game.rounds must be a positive integer, got {rounds!r}",
                config_key="game.rounds")

        if not isinstance(game.get('help_token'), str) or not game['help_token']:
            raise ConfigurationException(
                "game.help_token must be a non-empty string", config_key="game.help_token")

        exit_token = game.get('exit_token')
        if not isinstance(exit_token, int) or isinstance(exit_token, bool) or exit_token > 0:
            raise ConfigurationException(
                f"game.exit_token must be an integer <= 0, got {exit_token!r}",
                config_key="game.exit_token")

        key_length = fairness.get('key_length')
        if not isinstance(key_length, int) or isinstance(key_length, bool) or key_length < 16:
            raise ConfigurationException(
                f"fairness.key_length must be an integer >= 16, got {key_length!r}",
                config_key="fairness.key_length")

        algorithm = fairness.get('digest_algorithm')
        if algorithm not in hashlib.algorithms_available:
            raise ConfigurationException(
                f"Unknown digest algorithm: {algorithm!r}",
                config_key="fairness.digest_algorithm")

    @staticmethod
    def get_game_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """从配置中获取游戏配置"""
        return config.get('game', {})

    @staticmethod
    def get_fairness_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """从配置中获取公平性协议配置"""
        return config.get('fairness', {})

    @staticmethod
    def get_logging_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """从配置中获取日志配置"""
        return config.get('logging', {})
