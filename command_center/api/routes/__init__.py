"""API route handlers for the command center."""

from command_center.api.routes import agents as agents
from command_center.api.routes import harness as harness
from command_center.api.routes import health as health
from command_center.api.routes import mdo as mdo
from command_center.api.routes import missions as missions
from command_center.api.routes import ooda as ooda
from command_center.api.routes import swarm as swarm
