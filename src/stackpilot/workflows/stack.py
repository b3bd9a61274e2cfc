"""Stack workflow - create a stack wired to its parent stacks.

create() walks:

    exists? -> yes: done
            -> no:  load template
                    resolve parent outputs
                    merge with override file, save override file
                    submit create_stack
                    wait for CREATE_COMPLETE
"""

from dataclasses import dataclass, field
from pathlib import Path

from stackpilot.lib import overrides as overrides_module
from stackpilot.lib import paths
from stackpilot.lib.cfn import StackClient
from stackpilot.lib.errors import CreateError, PersistenceError, StackNotFoundError
from stackpilot.lib.poller import wait_for_state
from stackpilot.lib.progress import InteractiveLogger, Step
from stackpilot.lib.result import Err, Ok, Result
from stackpilot.lib.templates import Template, load_template
from stackpilot.models import (
    DEFAULT_CAPABILITIES,
    STAGE_TAG,
    StackConfig,
    StackCreateRequest,
    StackDescription,
    StackIdentity,
    StackState,
)
from stackpilot.operations import build_parameters, resolve_parent_outputs


@dataclass
class Stack:
    """One deployable stack.

    The StackClient and InteractiveLogger are supplied by the caller;
    nothing here builds AWS clients or writes to the terminal directly.
    """

    identity: StackIdentity
    client: StackClient
    ilog: InteractiveLogger
    config: StackConfig = field(default_factory=StackConfig)
    root: Path | None = None

    @property
    def name(self) -> str:
        return self.identity.name

    @property
    def environment(self) -> str:
        return self.config.environment or self.identity.name

    @property
    def template_file(self) -> Path:
        return paths.template_path(self.identity.app_name, self.root)

    @property
    def parameters_file(self) -> Path:
        return paths.parameters_path(self.identity.name, self.root)

    def overrides(self) -> Result[dict[str, str], PersistenceError]:
        """Current contents of this stack's override file."""
        return overrides_module.load(self.parameters_file)

    def create(self) -> Result[bool, CreateError]:
        """Create the stack unless it already exists.

        Ok(True) when the stack exists or reached CREATE_COMPLETE.
        Ok(False) when it failed remotely or did not finish in time.
        Err for problems that need an operator (bad template, broken
        override file, rejected submission); these are never retried.
        """
        with self.ilog.start(f"Creating CloudFormation stack {self.name}") as step:
            if self.client.exists(self.name):
                step.success(f"CloudFormation stack {self.name} already exists.")
                return Ok(True)

            match load_template(self.template_file):
                case Err() as e:
                    return e
                case Ok(template):
                    pass

            match self._prepare_parameters(template, step):
                case Err() as e:
                    return e
                case Ok(request):
                    pass

            match self.client.create(request):
                case Err() as e:
                    return e
                case Ok(stack_id):
                    step.note(f"Submitted {stack_id}")

            created = wait_for_state(
                self.client,
                self.name,
                StackState.CREATE_COMPLETE,
                "created",
                self.config.timeout_seconds,
                step,
                self.config.poll_interval,
            )
            if not created:
                return Ok(False)

            step.success(f"CloudFormation stack {self.name} created.")
            return Ok(True)

    def _prepare_parameters(
        self, template: Template, step: Step
    ) -> Result[StackCreateRequest, PersistenceError]:
        parent_outputs = resolve_parent_outputs(self.client, self.config.parent_stacks)

        match self.overrides():
            case Err() as e:
                return e
            case Ok(existing):
                pass

        built = build_parameters(parent_outputs, existing, template.parameter_names)

        # Persist before submitting so the merged values can be edited ahead of a retry
        match overrides_module.save(self.parameters_file, built.overrides):
            case Err() as e:
                return e
            case Ok(_):
                pass

        if built.parameters:
            step.note(f"Using {len(built.parameters)} parameter(s) from {self.parameters_file}")

        return Ok(
            StackCreateRequest(
                name=self.name,
                template_body=template.body,
                tags={STAGE_TAG: self.environment},
                parameters=built.parameters,
                capabilities=DEFAULT_CAPABILITIES,
            )
        )

    def status(self) -> Result[StackDescription, StackNotFoundError]:
        """Describe the stack as CloudFormation currently sees it."""
        description = self.client.describe(self.name)
        if description is None:
            return Err(StackNotFoundError(self.name))
        return Ok(description)
