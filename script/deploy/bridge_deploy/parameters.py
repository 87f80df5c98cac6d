#!/usr/bin/env python3
"""
World ID State Bridge Deployment Tool - Deployment Parameters

Every value the forge scripts read from the deployment configuration is
declared here once: the configuration key, the environment variable that can
provide it, the prompt shown when neither is set, and its type.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Union

DEFAULT_RPC_URL = "http://localhost:8545"


@dataclass(frozen=True)
class Parameter:
    key: str
    env_var: str
    prompt: str
    value_type: type = str
    default: Optional[Union[str, int]] = None
    secret: bool = False


def _rpc_url(key: str, env_var: str, chain: str) -> Parameter:
    return Parameter(
        key,
        env_var,
        f"Enter {chain} RPC URL: ({DEFAULT_RPC_URL}) ",
        default=DEFAULT_RPC_URL,
    )


_PARAMETERS = [
    Parameter("privateKey", "PRIVATE_KEY", "Enter your private key: ", secret=True),
    _rpc_url("ethereumRpcUrl", "ETH_RPC_URL", "Ethereum"),
    _rpc_url("optimismRpcUrl", "OP_RPC_URL", "Optimism"),
    _rpc_url("polygonRpcUrl", "POLYGON_RPC_URL", "Polygon"),
    Parameter(
        "optimismAlchemyApiKey",
        "OP_ALCHEMY_API_KEY",
        "Enter Optimism Alchemy API key: ",
        secret=True,
    ),
    Parameter(
        "ethereumEtherscanApiKey",
        "ETHERSCAN_API_KEY",
        "Enter Ethereum Etherscan API KEY: (https://etherscan.io/myaccount) ",
        secret=True,
    ),
    Parameter(
        "optimismEtherscanApiKey",
        "OPTIMISM_ETHERSCAN_API_KEY",
        "Enter Optimism Etherscan API KEY: (https://optimistic.etherscan.io/myaccount) ",
        secret=True,
    ),
    Parameter(
        "polygonscanApiKey",
        "POLYGONSCAN_API_KEY",
        "Enter Polygonscan API KEY: (https://polygonscan.com/myaccount) ",
        secret=True,
    ),
    Parameter("treeDepth", "TREE_DEPTH", "Enter WorldID tree depth: ", value_type=int),
    Parameter("stateBridgeAddress", "STATE_BRIDGE_ADDRESS", "Enter State Bridge Address: "),
    Parameter(
        "optimismWorldIDAddress",
        "OPTIMISM_WORLD_ID_ADDRESS",
        "Enter Optimism World ID Address: ",
    ),
    Parameter(
        "polygonWorldIDAddress",
        "POLYGON_WORLD_ID_ADDRESS",
        "Enter Polygon World ID Address: ",
    ),
    Parameter(
        "worldIDIdentityManagerAddress",
        "WORLD_ID_IDENTITY_MANAGER_ADDRESS",
        "Enter World ID Identity Manager Address (world-id-contracts or WorldIDMock): ",
    ),
    Parameter("newRoot", "NEW_ROOT", "Enter WorldID root to be inserted into MockWorldID: "),
    Parameter("deployerAddress", "DEPLOYER_ADDRESS", "Enter deployer address: "),
    Parameter(
        "opGasLimitSendRootOptimism",
        "OP_GAS_LIMIT_SEND_ROOT_OPTIMISM",
        "Enter the Optimism gas limit for sendRootOptimism: ",
        value_type=int,
    ),
    Parameter(
        "opGasLimitSetRootHistoryExpiryOptimism",
        "OP_GAS_LIMIT_SET_ROOT_HISTORY_EXPIRY_OPTIMISM",
        "Enter the Optimism gas limit for setRootHistoryExpiryOptimism: ",
        value_type=int,
    ),
    Parameter(
        "opGasLimitTransferOwnershipOptimism",
        "OP_GAS_LIMIT_TRANSFER_OWNERSHIP_OPTIMISM",
        "Enter the Optimism gas limit for transferOwnershipOptimism: ",
        value_type=int,
    ),
]

PARAMETERS: Dict[str, Parameter] = {parameter.key: parameter for parameter in _PARAMETERS}


def get_parameter(key: str) -> Parameter:
    """Look up a parameter by configuration key"""
    try:
        return PARAMETERS[key]
    except KeyError:
        raise ValueError(f"Unknown configuration key: {key}")
