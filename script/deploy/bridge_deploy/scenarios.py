#!/usr/bin/env python3
"""
World ID State Bridge Deployment Tool - Deployment Scenarios

Each scenario is a fixed, hand-ordered list of steps:
- Resolve: gather a parameter (config, environment or prompt)
- Checkpoint: save the configuration (the forge scripts read it from disk)
- Run: run a forge script

Contract addresses are resolved only after the step that deploys the
contract, and the configuration is saved before every forge script.
"""

from dataclasses import dataclass, replace
from functools import partial
from typing import Dict, List, Tuple, Union
from .config_store import ConfigStore
from .parameters import get_parameter
from .plan import Plan
from .prompt import resolve_parameter
from .runner import ForgeRunner, ScriptAction

DEPLOY_DIR = "src/script/deploy"
INITIALIZE_DIR = "src/script/initialize"
TEST_DIR = "src/script/test"


@dataclass(frozen=True)
class Resolve:
    key: str


@dataclass(frozen=True)
class Checkpoint:
    pass


@dataclass(frozen=True)
class Run:
    action: ScriptAction


ScenarioStep = Union[Resolve, Checkpoint, Run]


@dataclass(frozen=True)
class Scenario:
    name: str
    description: str
    steps: Tuple[ScenarioStep, ...]

    @property
    def keys(self) -> List[str]:
        """Configuration keys resolved by this scenario, in order"""
        return [step.key for step in self.steps if isinstance(step, Resolve)]

    @property
    def actions(self) -> List[ScriptAction]:
        return [step.action for step in self.steps if isinstance(step, Run)]


#
# Forge scripts
#

DEPLOY_STATE_BRIDGE_GOERLI = ScriptAction(
    "Deploying State Bridge",
    f"{DEPLOY_DIR}/DeployStateBridgeGoerli.s.sol", "DeployStateBridge",
    rpc_key="ethereumRpcUrl", explorer_key="ethereumEtherscanApiKey", verify=True,
)
DEPLOY_STATE_BRIDGE_MAINNET = ScriptAction(
    "Deploying State Bridge",
    f"{DEPLOY_DIR}/DeployStateBridgeMainnet.s.sol", "DeployStateBridge",
    rpc_key="ethereumRpcUrl", explorer_key="ethereumEtherscanApiKey", verify=True,
)
DEPLOY_POLYGON_WORLD_ID_MUMBAI = ScriptAction(
    "Deploying PolygonWorldID",
    f"{DEPLOY_DIR}/DeployPolygonWorldIDMumbai.s.sol", "DeployPolygonWorldIDMumbai",
    rpc_key="polygonRpcUrl", explorer_key="polygonscanApiKey", verify=True, legacy=True,
)
DEPLOY_POLYGON_WORLD_ID_MAINNET = ScriptAction(
    "Deploying PolygonWorldID",
    f"{DEPLOY_DIR}/DeployPolygonWorldIDMainnet.s.sol", "DeployPolygonWorldIDMainnet",
    rpc_key="polygonRpcUrl", explorer_key="polygonscanApiKey", verify=True, legacy=True,
)
DEPLOY_MOCK_WORLD_ID = ScriptAction(
    "Deploying Mock WorldID",
    f"{DEPLOY_DIR}/DeployMockWorldID.s.sol", "DeployMockWorldID",
    rpc_key="ethereumRpcUrl", explorer_key="ethereumEtherscanApiKey", verify=True,
)
DEPLOY_OPTIMISM_WORLD_ID = ScriptAction(
    "Deploying OpWorldID",
    f"{DEPLOY_DIR}/DeployOpWorldID.s.sol", "DeployOpWorldID",
    rpc_key="optimismRpcUrl", explorer_key="optimismEtherscanApiKey", verify=True,
)
DEPLOY_MOCK_OP_POLYGON_WORLD_ID = ScriptAction(
    "Deploying MockOpPolygonWorldID",
    f"{DEPLOY_DIR}/DeployMockOpPolygonWorldID.s.sol", "DeployMockOpPolygonWorldID",
    rpc_key="ethereumRpcUrl", explorer_key="ethereumEtherscanApiKey", verify=True,
)
DEPLOY_MOCK_STATE_BRIDGE = ScriptAction(
    "Deploying MockStateBridge",
    f"{DEPLOY_DIR}/DeployMockStateBridge.s.sol", "DeployMockStateBridge",
    rpc_key="ethereumRpcUrl", explorer_key="ethereumEtherscanApiKey", verify=True,
)
# No --etherscan-api-key: forge --verify falls back to $ETHERSCAN_API_KEY
INITIALIZE_MOCK_WORLD_ID = ScriptAction(
    "Initializing MockWorldID",
    f"{INITIALIZE_DIR}/InitializeMockWorldID.s.sol", "InitializeMockWorldID",
    rpc_key="ethereumRpcUrl", verify=True,
)
INITIALIZE_POLYGON_WORLD_ID = ScriptAction(
    "Initializing PolygonWorldID",
    f"{INITIALIZE_DIR}/InitializePolygonWorldID.s.sol", "InitializePolygonWorldID",
    rpc_key="polygonRpcUrl",
)
TRANSFER_OWNERSHIP_OP_WORLD_ID_GOERLI = ScriptAction(
    "Transferring ownership of OpWorldID to StateBridge",
    f"{INITIALIZE_DIR}/TransferOwnershipOfOpWorldIDGoerli.s.sol", "TransferOwnershipOfOpWorldIDGoerli",
    rpc_key="optimismRpcUrl",
)
TRANSFER_OWNERSHIP_OP_WORLD_ID_MAINNET = ScriptAction(
    "Transferring ownership of OpWorldID to StateBridge",
    f"{INITIALIZE_DIR}/TransferOwnershipOfOpWorldIDMainnet.s.sol", "TransferOwnershipOfOpWorldIDMainnet",
    rpc_key="optimismRpcUrl",
)
SEND_STATE_ROOT_TO_STATE_BRIDGE = ScriptAction(
    "Sending test WorldID merkle tree root from MockWorldID to StateBridge",
    f"{TEST_DIR}/SendStateRootToStateBridge.s.sol", "SendStateRootToStateBridge",
    rpc_key="ethereumRpcUrl",
)
SET_OP_GAS_LIMIT = ScriptAction(
    "Setting Optimism gas limits for the StateBridge",
    f"{INITIALIZE_DIR}/SetOpGasLimit.s.sol", "SetOpGasLimit",
    rpc_key="ethereumRpcUrl",
)


def _without_verification(action: ScriptAction) -> ScriptAction:
    return replace(action, explorer_key=None, verify=False)


#
# Shared step sequences
#

ACCOUNT_AND_RPC_URLS = (
    Resolve("privateKey"),
    Resolve("ethereumRpcUrl"),
    Resolve("optimismRpcUrl"),
    Resolve("polygonRpcUrl"),
)

EXPLORER_KEYS = (
    Resolve("ethereumEtherscanApiKey"),
    Resolve("optimismEtherscanApiKey"),
    Resolve("polygonscanApiKey"),
)

SETUP = ACCOUNT_AND_RPC_URLS + EXPLORER_KEYS + (Resolve("treeDepth"), Checkpoint())

WORLD_ID_ADDRESSES = (
    Resolve("worldIDIdentityManagerAddress"),
    Resolve("optimismWorldIDAddress"),
    Resolve("polygonWorldIDAddress"),
    Checkpoint(),
)

STATE_BRIDGE_ADDRESS = (Resolve("stateBridgeAddress"), Checkpoint())

NEW_ROOT = (Resolve("newRoot"), Checkpoint())


#
# Scenarios
#

MAINNET = Scenario(
    "deploy",
    "Interactively deploys the WorldID state bridge on Ethereum mainnet.",
    SETUP + (
        Run(DEPLOY_OPTIMISM_WORLD_ID),
        Run(DEPLOY_POLYGON_WORLD_ID_MAINNET),
    ) + WORLD_ID_ADDRESSES + (
        Run(DEPLOY_STATE_BRIDGE_MAINNET),
    ) + STATE_BRIDGE_ADDRESS + (
        Run(INITIALIZE_POLYGON_WORLD_ID),
        Run(TRANSFER_OWNERSHIP_OP_WORLD_ID_MAINNET),
    ),
)

TESTNET = Scenario(
    "deploy-testnet",
    "Interactively deploys the WorldID state bridge on the Goerli testnet.",
    SETUP + (
        Run(DEPLOY_OPTIMISM_WORLD_ID),
        Run(DEPLOY_POLYGON_WORLD_ID_MUMBAI),
    ) + WORLD_ID_ADDRESSES + (
        Run(DEPLOY_STATE_BRIDGE_GOERLI),
    ) + STATE_BRIDGE_ADDRESS + (
        Run(INITIALIZE_POLYGON_WORLD_ID),
        Run(TRANSFER_OWNERSHIP_OP_WORLD_ID_GOERLI),
    ),
)

# Devnets have no block explorer: same contracts as the testnet, no verification
DEVNET = Scenario(
    "deploy-devnet",
    "Interactively deploys the WorldID state bridge on a devnet, without block explorer verification.",
    ACCOUNT_AND_RPC_URLS + (Resolve("treeDepth"), Checkpoint()) + (
        Run(_without_verification(DEPLOY_OPTIMISM_WORLD_ID)),
        Run(_without_verification(DEPLOY_POLYGON_WORLD_ID_MUMBAI)),
    ) + WORLD_ID_ADDRESSES + (
        Run(_without_verification(DEPLOY_STATE_BRIDGE_GOERLI)),
    ) + STATE_BRIDGE_ADDRESS + (
        Run(INITIALIZE_POLYGON_WORLD_ID),
        Run(TRANSFER_OWNERSHIP_OP_WORLD_ID_GOERLI),
    ),
)

MOCK = Scenario(
    "mock",
    "Mocks the WorldID identity manager and deploys the WorldID state bridge on testnets.",
    SETUP + (
        Run(DEPLOY_MOCK_WORLD_ID),
        Run(DEPLOY_OPTIMISM_WORLD_ID),
        Run(DEPLOY_POLYGON_WORLD_ID_MUMBAI),
    ) + WORLD_ID_ADDRESSES + (
        Run(DEPLOY_STATE_BRIDGE_GOERLI),
    ) + STATE_BRIDGE_ADDRESS + (
        Run(INITIALIZE_MOCK_WORLD_ID),
        Run(INITIALIZE_POLYGON_WORLD_ID),
        Run(TRANSFER_OWNERSHIP_OP_WORLD_ID_GOERLI),
    ) + NEW_ROOT + (
        Run(SEND_STATE_ROOT_TO_STATE_BRIDGE),
    ),
)

LOCAL_MOCK = Scenario(
    "local-mock",
    "Mocks the WorldID identity manager, the L2 WorldIDs and the state bridge on a single chain.",
    SETUP + (
        Run(DEPLOY_MOCK_WORLD_ID),
        Run(DEPLOY_MOCK_OP_POLYGON_WORLD_ID),
    ) + WORLD_ID_ADDRESSES + (
        Run(DEPLOY_MOCK_STATE_BRIDGE),
    ) + STATE_BRIDGE_ADDRESS + (
        Run(INITIALIZE_MOCK_WORLD_ID),
    ) + NEW_ROOT + (
        Run(SEND_STATE_ROOT_TO_STATE_BRIDGE),
    ),
)

SET_OP_GAS_LIMIT_SCENARIO = Scenario(
    "set-op-gas-limit",
    "Sets the gas limit for each State Bridge function that targets Optimism's crossDomainMessenger.",
    (
        Resolve("ethereumRpcUrl"),
        Resolve("optimismWorldIDAddress"),
        Resolve("optimismAlchemyApiKey"),
        Resolve("deployerAddress"),
        Checkpoint(),
        Resolve("opGasLimitSendRootOptimism"),
        Resolve("opGasLimitSetRootHistoryExpiryOptimism"),
        Resolve("opGasLimitTransferOwnershipOptimism"),
        Checkpoint(),
        Run(SET_OP_GAS_LIMIT),
    ),
)

SCENARIOS: Dict[str, Scenario] = {
    scenario.name: scenario
    for scenario in (MAINNET, TESTNET, DEVNET, MOCK, LOCAL_MOCK, SET_OP_GAS_LIMIT_SCENARIO)
}


def build_plan(scenario: Scenario, plan: Plan, config_store: ConfigStore, invoker: ForgeRunner) -> Plan:
    """Append the steps of a scenario to plan, in order"""
    for step in scenario.steps:
        if isinstance(step, Resolve):
            parameter = get_parameter(step.key)
            plan.add(f"Resolving {step.key}", partial(resolve_parameter, parameter=parameter))
        elif isinstance(step, Checkpoint):
            plan.add("Saving configuration", config_store.save)
        elif isinstance(step, Run):
            plan.add(step.action.label, partial(invoker.invoke, step.action))
        else:
            raise TypeError(f"Unknown scenario step: {step!r}")
    return plan
