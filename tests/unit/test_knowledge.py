"""Unit tests for the knowledge base and concept decomposer."""

import pytest

from principia.knowledge import ConceptDecomposer, ConceptKnowledgeBase
from principia.types import ComponentRelation, PrincipleCategory, RelationKind

WIDGET_TEXT = "The widget motor requires battery power and the frame supports the housing."


class TestConceptKnowledgeBase:
    """Test ConceptKnowledgeBase lookups and registration."""

    def test_synonym_normalization(self):
        """Test synonyms normalize to their canonical concept."""
        kb = ConceptKnowledgeBase.default()
        assert kb.normalize("Drone") == "uav"
        assert kb.normalize("actuator") == "motor"

    def test_lookup_synonym(self):
        """Test lookup_synonym resolves or returns None."""
        kb = ConceptKnowledgeBase.default()
        assert kb.lookup_synonym("Quadcopter") == "uav"
        assert kb.lookup_synonym("engine") == "motor"
        assert kb.lookup_synonym("teapot") is None

    def test_own_hierarchy_beats_synonym(self):
        """Test a concept with its own hierarchy is not remapped."""
        assert ConceptKnowledgeBase.default().normalize("engine") == "engine"

    def test_contains(self):
        """Test membership covers hierarchies and synonyms."""
        kb = ConceptKnowledgeBase.default()
        assert "quadcopter" in kb
        assert "teapot" not in kb

    def test_default_is_isolated_copy(self):
        """Test default() returns an independent copy."""
        kb = ConceptKnowledgeBase.default()
        kb.hierarchies["uav"].append("landing gear")
        assert "landing gear" not in ConceptKnowledgeBase.default().hierarchies["uav"]

    def test_add_concept(self):
        """Test add_concept registers hierarchy, relations and synonyms."""
        kb = ConceptKnowledgeBase.default()
        kb.add_concept(
            "Wind Turbine",
            ["rotor", "nacelle", "tower"],
            relationships=[ComponentRelation("rotor", RelationKind.PART_OF, 0.9)],
            synonyms=["windmill"],
        )
        assert kb.normalize("windmill") == "wind turbine"
        assert kb.sub_concepts("wind turbine") == ["rotor", "nacelle", "tower"]
        assert kb.relations_for("wind turbine")[0].component_name == "rotor"

    def test_category_default(self):
        """Test unknown components fall back to System."""
        kb = ConceptKnowledgeBase.default()
        assert kb.category_for("battery") == PrincipleCategory.ELECTRICAL
        assert kb.category_for("unknown part") == PrincipleCategory.SYSTEM


class TestDecomposeFromKnowledgeBase:
    """Test decomposition of known concepts."""

    def test_uav_example(self):
        """Test the uav decomposition components, relations and confidence."""
        d = ConceptDecomposer().decompose("uav", 2)
        motor = d.component("motor")
        battery = d.component("battery")
        assert motor is not None and motor.category == PrincipleCategory.MECHANICAL
        assert battery is not None and battery.category == PrincipleCategory.ELECTRICAL
        assert motor.importance > 0.5
        assert battery.importance > 0.5
        assert any(
            r.component_name == "battery" and r.relation_kind == RelationKind.REQUIRES
            for r in d.relationships
        )
        assert d.confidence == pytest.approx(0.95)

    def test_importance_clamped(self):
        """Test importance stays within [0, 1]."""
        for c in ConceptDecomposer().decompose("uav", 2).components:
            assert 0.0 <= c.importance <= 1.0

    def test_components_sorted_by_importance(self):
        """Test components are ordered by descending importance."""
        importances = [c.importance for c in ConceptDecomposer().decompose("uav").components]
        assert importances == sorted(importances, reverse=True)

    def test_depth_controls_sub_components(self):
        """Test sub-components only appear below depth 1."""
        decomposer = ConceptDecomposer()
        shallow = decomposer.decompose("uav", 1).component("flight controller")
        deep = decomposer.decompose("uav", 2).component("flight controller")
        assert shallow.sub_component_names == []
        assert "gyroscope" in deep.sub_component_names

    def test_synonym_input_keeps_concept_name(self):
        """Test the caller's spelling is kept as the concept name."""
        d = ConceptDecomposer().decompose("drone")
        assert d.concept == "drone"
        assert d.component("motor") is not None


class TestDecomposeFromText:
    """Test decomposition of unknown concepts from page text."""

    def test_extracts_components_and_relations(self):
        """Test component and relation extraction from text."""
        d = ConceptDecomposer().decompose("widget", source_text=WIDGET_TEXT)
        names = [c.name for c in d.components]
        assert {"motor", "battery", "frame", "housing"} <= set(names)
        assert d.component("battery").category == PrincipleCategory.ELECTRICAL
        assert any(
            r.relation_kind == RelationKind.REQUIRES and r.component_name == "battery"
            for r in d.relationships
        )
        assert 0.0 < d.confidence <= 1.0

    def test_unknown_without_text_is_empty(self):
        """Test an unknown concept with no text decomposes to nothing."""
        d = ConceptDecomposer().decompose("teapot")
        assert d.components == []
        assert d.confidence == 0.0

    def test_max_components(self):
        """Test max_components caps extracted components."""
        d = ConceptDecomposer(max_components=2).decompose("widget", source_text=WIDGET_TEXT)
        assert len(d.components) == 2


class TestPrinciples:
    """Test principle derivation from decompositions."""

    def test_decomposition_to_principles(self):
        """Test component principles carry titles and the reference."""
        decomposer = ConceptDecomposer()
        principles = decomposer.decomposition_to_principles(decomposer.decompose("uav"), "ref")
        titles = {p.title for p in principles}
        assert "Motor Mechanism" in titles
        assert "Battery Circuit Principle" in titles
        assert all(p.source_reference == "ref" for p in principles)

    def test_analyze_concept_default_reference(self):
        """Test analyze_concept defaults to the Wikipedia URL."""
        principles = ConceptDecomposer().analyze_concept("bridge")
        assert principles
        assert principles[0].source_reference == "https://en.wikipedia.org/wiki/bridge"

    def test_concept_tree(self):
        """Test concept_tree nests sub-concepts as dicts."""
        tree = ConceptDecomposer().concept_tree("uav", 2)
        assert "motor" in tree["propulsion system"]
        assert tree["propulsion system"]["motor"] == {}
