from assignmate.services.generation import GenerationService
from assignmate.services.humanizer import HumanizerService, humanizer_service


def get_generation_service() -> GenerationService:
    return GenerationService()


def get_humanizer() -> HumanizerService:
    return humanizer_service
