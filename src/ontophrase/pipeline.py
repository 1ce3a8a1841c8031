"""
End-to-end processing: statements -> arena -> classification -> definitions.

    processor = OntologyProcessor(config, tagger=NltkTagger())
    class_def = processor.run(statements)
    json.dump(class_def.to_dict(), fp)
"""

from typing import Iterable, Optional

from .canonical import CanonicalPhraseSynthesizer
from .classifier import classify
from .config import DEFAULT_CONFIG, ResolverConfig, get_logger
from .emitter import Emitter
from .graph_builder import build_graph
from .model import ClassDefinition, OntologyGraph
from .property_resolver import PropertyTypeResolver
from .tagger import PosTagger

logger = get_logger(__name__)


class OntologyProcessor:

    def __init__(self, config: ResolverConfig = DEFAULT_CONFIG, tagger: Optional[PosTagger] = None):
        self.config = config
        self.synthesizer = CanonicalPhraseSynthesizer(config, tagger)

    def classify(self, statements: Iterable) -> OntologyGraph:
        return classify(build_graph(statements, self.config), self.config)

    def resolver_for(self, graph: OntologyGraph) -> PropertyTypeResolver:
        return PropertyTypeResolver(graph, self.config, self.synthesizer)

    def run(self, statements: Iterable) -> ClassDefinition:
        graph = self.classify(statements)
        definitions = Emitter(self.resolver_for(graph)).emit()

        short_name = self.config.class_name[self.config.class_name.rfind(".") + 1:]
        return ClassDefinition(
            kind=self.config.class_name,
            types=tuple(definitions),
            whitelist=tuple(q.strip() for q in self.config.whitelist),
            name=f"{short_name} in Schema.org",
            description="Scraped data from websites that support schema.org",
        )
