from bridge_deploy.runner import ForgeRunner, ScriptAction
from bridge_deploy.scenarios import (
    DEPLOY_POLYGON_WORLD_ID_MUMBAI,
    DEPLOY_STATE_BRIDGE_GOERLI,
    INITIALIZE_POLYGON_WORLD_ID,
)

CONFIG = {
    "privateKey": "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80",
    "ethereumRpcUrl": "https://eth-goerli.g.alchemy.com/v2/alchemykey123",
    "polygonRpcUrl": "http://localhost:8545",
    "ethereumEtherscanApiKey": "ETHERSCANKEY1",
    "polygonscanApiKey": "POLYGONSCANKEY1",
}


def test_command_with_explorer_verification():
    cmd = ForgeRunner().build_command(DEPLOY_POLYGON_WORLD_ID_MUMBAI, CONFIG)

    assert cmd == [
        "forge", "script",
        "src/script/deploy/DeployPolygonWorldIDMumbai.s.sol:DeployPolygonWorldIDMumbai",
        "--fork-url", "http://localhost:8545",
        "--etherscan-api-key", "POLYGONSCANKEY1",
        "--legacy",
        "--broadcast",
        "--verify",
        "-vvvv",
    ]


def test_command_without_explorer():
    cmd = ForgeRunner().build_command(INITIALIZE_POLYGON_WORLD_ID, CONFIG)

    assert cmd == [
        "forge", "script",
        "src/script/initialize/InitializePolygonWorldID.s.sol:InitializePolygonWorldID",
        "--fork-url", "http://localhost:8545",
        "--broadcast",
        "-vvvv",
    ]


def test_missing_value_is_passed_empty(capsys):
    action = ScriptAction("Test", "src/script/Test.s.sol", "Test", rpc_key="optimismRpcUrl")

    cmd = ForgeRunner().build_command(action, CONFIG)

    assert cmd[cmd.index("--fork-url") + 1] == ""
    assert "optimismRpcUrl is not set" in capsys.readouterr().out


def test_successful_run(fake_forge, capsys):
    output = ForgeRunner().invoke(DEPLOY_STATE_BRIDGE_GOERLI, CONFIG)

    assert output.ok
    assert output.returncode == 0
    assert output.stdout == "DeployStateBridge done"
    out = capsys.readouterr().out
    assert "DeployStateBridge done" in out
    assert "DeployStateBridgeGoerli.s.sol ran successfully!" in out


def test_failed_run_is_reported_not_raised(fake_forge, capsys):
    fake_forge.failing.add("DeployStateBridge")

    output = ForgeRunner().invoke(DEPLOY_STATE_BRIDGE_GOERLI, CONFIG)

    assert not output.ok
    assert output.returncode == 1
    assert output.stdout == "DeployStateBridge reverted"
    assert "DeployStateBridgeGoerli.s.sol failed" in capsys.readouterr().out


def test_missing_forge_is_reported_not_raised(fake_forge):
    fake_forge.missing = True

    output = ForgeRunner().invoke(DEPLOY_STATE_BRIDGE_GOERLI, CONFIG)

    assert not output.ok
    assert output.returncode is None
    assert "Could not run forge" in output.error


def test_secrets_are_masked_in_output(fake_forge, capsys):
    ForgeRunner().invoke(DEPLOY_STATE_BRIDGE_GOERLI, CONFIG)

    out = capsys.readouterr().out
    assert "ETHERSCANKEY1" not in out
    assert "$ETHERSCAN_API_KEY" in out
    assert "alchemykey123" not in out
    assert "$ALCHEMY_API_KEY" in out
    # the real values still reach forge
    assert "ETHERSCANKEY1" in fake_forge.commands[0]


def test_output_is_logged(fake_forge, tmp_path):
    log_dir = tmp_path / "logs"

    ForgeRunner(log_dir=log_dir).invoke(DEPLOY_STATE_BRIDGE_GOERLI, CONFIG)

    log = (log_dir / "forge-DeployStateBridge.log").read_text()
    assert "Exit code: 0" in log
    assert "DeployStateBridge done" in log
    assert "ETHERSCANKEY1" not in log
