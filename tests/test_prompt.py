import pytest

from bridge_deploy.parameters import DEFAULT_RPC_URL, PARAMETERS
from bridge_deploy.prompt import InvalidInputError, ask, coerce, resolve, resolve_parameter


@pytest.mark.parametrize("answer", ["y", "Y", "true", "True", " y "])
def test_bool_yes_answers(answer):
    assert coerce(answer, bool) is True


@pytest.mark.parametrize("answer", ["n", "N", "false", "False"])
def test_bool_no_answers(answer):
    assert coerce(answer, bool) is False


@pytest.mark.parametrize("answer", ["yes", "no", "1", "TRUE", "maybe"])
def test_bool_rejects_other_answers(answer):
    with pytest.raises(InvalidInputError):
        coerce(answer, bool)


@pytest.mark.parametrize("value_type", [bool, int])
def test_empty_answer_is_unset(value_type):
    assert coerce("", value_type) is None
    assert coerce("   ", value_type) is None


def test_int_answers():
    assert coerce(" 30 ", int) == 30
    with pytest.raises(InvalidInputError):
        coerce("thirty", int)


@pytest.mark.parametrize("answer", ["1_000", "-30", "+30", "3.0", "0x1e"])
def test_int_answers_must_be_plain_digits(answer):
    with pytest.raises(InvalidInputError):
        coerce(answer, int)


def test_text_answers_are_kept_verbatim():
    assert coerce("0xabc", None) == "0xabc"
    assert coerce("0xabc", str) == "0xabc"


def test_ask_reads_the_terminal(answers):
    questions = answers("Y")
    assert ask("Continue? ", bool) is True
    assert questions == ["Continue? "]


def test_present_key_is_not_resolved_again(monkeypatch, no_prompt):
    monkeypatch.setenv("PRIVATE_KEY", "0xfromenv")
    config = {"privateKey": "0xsaved"}

    assert resolve_parameter(config, PARAMETERS["privateKey"]) == "0xsaved"
    assert config == {"privateKey": "0xsaved"}


def test_environment_beats_prompt(monkeypatch, no_prompt):
    monkeypatch.setenv("TREE_DEPTH", "30")
    config = {}

    resolve_parameter(config, PARAMETERS["treeDepth"])

    assert config == {"treeDepth": 30}


def test_prompt_when_nothing_else_provides_a_value(answers):
    questions = answers("20")
    config = {}

    resolve_parameter(config, PARAMETERS["opGasLimitSendRootOptimism"])

    assert config == {"opGasLimitSendRootOptimism": 20}
    assert questions == [PARAMETERS["opGasLimitSendRootOptimism"].prompt]


def test_empty_environment_value_counts_as_unset(monkeypatch, answers):
    monkeypatch.setenv("PRIVATE_KEY", "")
    answers("0xtyped")
    config = {}

    resolve_parameter(config, PARAMETERS["privateKey"])

    assert config["privateKey"] == "0xtyped"


def test_empty_config_value_is_resolved_again(answers):
    answers("0x1234")
    config = {"stateBridgeAddress": ""}

    resolve_parameter(config, PARAMETERS["stateBridgeAddress"])

    assert config["stateBridgeAddress"] == "0x1234"


def test_default_used_when_answer_is_empty(answers):
    answers("")
    config = {}

    resolve_parameter(config, PARAMETERS["ethereumRpcUrl"])

    assert config["ethereumRpcUrl"] == DEFAULT_RPC_URL


def test_no_answer_and_no_default_leaves_key_unset(answers):
    answers("")
    config = {}

    assert resolve(config, "newRoot", "NEW_ROOT", "Root: ") is None
    assert "newRoot" not in config


def test_invalid_environment_value_is_rejected(monkeypatch, no_prompt):
    monkeypatch.setenv("TREE_DEPTH", "deep")

    with pytest.raises(InvalidInputError):
        resolve_parameter({}, PARAMETERS["treeDepth"])


def test_invalid_typed_answer_is_rejected(answers):
    answers("lots")

    with pytest.raises(InvalidInputError):
        resolve_parameter({}, PARAMETERS["opGasLimitTransferOwnershipOptimism"])
