"""
Ordered provisioning steps and the runner that stops on the first failure
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from azure.core.exceptions import AzureError

from servicebus_scripts.create.create_authorization_rule import create_authorization_rule, list_keys
from servicebus_scripts.create.create_namespace import create_namespace
from servicebus_scripts.create.create_queue import create_queue
from servicebus_scripts.create.create_resource_group import create_resource_group
from servicebus_scripts.create.create_subscription import create_subscription
from servicebus_scripts.create.create_topic import create_topic
from servicebus_scripts.destroy.destroy_resource_group import delete_resource_group


@dataclass(frozen=True)
class Step:
    name: str
    failure_message: str
    action: Callable[[Any], Any]


@dataclass(frozen=True)
class StepResult:
    step: Step
    value: Any = None
    error: Optional[AzureError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def describe_failure(self) -> str:
        return f"{self.step.failure_message}: {self.error}"


# Parents before children: namespace before its entities, topic before subscription
PROVISIONING_STEPS = (
    Step("group-create", "Group create failed", create_resource_group),
    Step("namespace-create", "Namespace create failed", create_namespace),
    Step("authrule-create", "Authorization rule create failed", create_authorization_rule),
    Step("keys-list", "List keys failed", list_keys),
    Step("queue-create", "Queue create failed", create_queue),
    Step("topic-create", "Topic create failed", create_topic),
    Step("subscription-create", "Subscription create failed", create_subscription),
)

TEARDOWN_STEP = Step("group-delete", "Group delete failed", delete_resource_group)


def run_step(step: Step, context) -> StepResult:
    """
    Run one step. Azure SDK errors become a failed result, anything else
    is a bug and propagates.
    """
    try:
        value = step.action(context)
    except AzureError as e:
        return StepResult(step, error=e)
    return StepResult(step, value=value)


def run_steps(steps, context) -> List[StepResult]:
    """
    Run steps in order. The returned list ends with the first failed result,
    if any; later steps are never started.
    """
    results = []
    for step in steps:
        result = run_step(step, context)
        results.append(result)
        if not result.ok:
            break
    return results
