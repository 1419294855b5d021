from abc import ABC, abstractmethod
from typing import Dict, Any

class BaseAgent(ABC):
    """
    Base class for agents driven by the chat router.
    Every agent must implement the .run() method.
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    async def run(self, goal: str, context: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute one unit of agent work.

        Parameters:
            goal: What the caller wants this agent to do
            context: Data required to complete the goal

        Returns:
            A dictionary with the goal's result fields.
        """
        pass

    def __repr__(self):
        return f"<Agent name={self.name}>"
