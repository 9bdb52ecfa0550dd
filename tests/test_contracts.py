"""
Tests for the session manager, forge, video artifact, project and edit
history contracts.
"""
import pytest
from pydantic import TypeAdapter, ValidationError

from flingoos_shared.contracts import (
    EDIT_HISTORY_CAP,
    ConceptRelationshipSchema,
    ContextListOutputSchema,
    CreateProjectSchema,
    EditHistoryVersionSchema,
    FlowchartSchema,
    ForgeJob,
    ForgeTriggerSchema,
    IdempotencyHeaderSchema,
    KnowledgeBaseContentSchema,
    ProjectContextSchema,
    ProjectWithStatsSchema,
    ServiceErrorEnvelopeSchema,
    Session,
    SessionContextSchema,
    SessionEventSchema,
    SessionInternalStateSchema,
    StageExecutionSchema,
    UpdateSessionProjectSchema,
    VideoWorkflowGuideContentSchema,
    Workflow,
    WorkflowDataSchema,
    WorkflowGuideContentSchema,
)


@pytest.fixture
def workflow_guide():
    return {
        "task_summary": {
            "name": "Create invoice",
            "goal": "Bill a customer",
            "tools_used": ["QuickBooks"],
            "complexity": "Simple",
        },
        "temporal_phases": [{
            "phase_number": 1,
            "timestamp_range": {"start": 0, "end": 42.5},
            "name": "Setup",
            "purpose": "Open the invoice form",
            "key_actions": ["Open QuickBooks"],
            "confidence": "High",
        }],
        "step_by_step_guide": [{
            "step_number": 1,
            "timestamp": 3.2,
            "title": "Open invoices",
            "action": "Click Sales > Invoices",
            "expected_result": "Invoice list is shown",
            "confidence": "High",
        }],
        "quick_reference": {"prerequisites": ["QuickBooks login"]},
    }


@pytest.fixture
def knowledge_base():
    return {
        "session_summary": {
            "topic": "Month-end close",
            "knowledge_level": "intermediate",
            "session_type": "procedural_demo",
        },
        "knowledge_items": [
            {"item_id": "k1", "type": "concept", "timestamp": 10, "title": "Accruals",
             "content": "Record expenses when incurred", "importance": "High"},
            {"item_id": "k2", "type": "procedure", "timestamp": 65, "title": "Post accruals",
             "content": "Use the journal entry form", "importance": "critical"},
        ],
        "concept_relationships": [
            {"from": "k2", "to": "k1", "relationship": "requires", "description": "Posting needs the concept"},
        ],
        "key_takeaways": ["Close the books on day 3"],
    }


class TestSessionManagerContracts:
    """Test session manager state, idempotency and events."""

    def test_internal_state_alias(self):
        assert Session is SessionInternalStateSchema
        state = Session(session_id="sess_1", status="active")
        assert state.workflow_ready is None

    def test_internal_state_rejects_unknown_status(self):
        with pytest.raises(ValidationError):
            SessionInternalStateSchema(session_id="sess_1", status="paused")

    def test_idempotency_headers(self):
        headers = IdempotencyHeaderSchema(**{"idempotency-key": "session-sess_1", "x-force-rerun": "true"})
        assert headers.idempotency_key == "session-sess_1"
        assert headers.model_dump(by_alias=True) == {"idempotency-key": "session-sess_1", "x-force-rerun": "true"}

    def test_session_event_discriminator(self):
        adapter = TypeAdapter(SessionEventSchema)
        event = adapter.validate_python({"type": "upload_complete", "message": "Done", "has_workflow": True})
        assert event.has_workflow is True

        with pytest.raises(ValidationError):
            adapter.validate_python({"type": "unknown_event"})


class TestForgeContracts:
    """Test forge triggers, stage executions and jobs."""

    def test_trigger_example(self):
        example = ForgeTriggerSchema.model_config["json_schema_extra"]["example"]
        trigger = ForgeTriggerSchema(**example)
        assert trigger.options.stages == ["A", "B", "C", "D", "E", "F", "G"]

    def test_trigger_rejects_unknown_stage(self):
        example = ForgeTriggerSchema.model_config["json_schema_extra"]["example"]
        bad = {**example, "options": {**example["options"], "stages": ["A", "Z"]}}
        with pytest.raises(ValidationError):
            ForgeTriggerSchema(**bad)

    def test_stage_execution_defaults(self):
        execution = StageExecutionSchema(stage="C", status="running", started_at="2024-01-15T10:00:00Z")
        assert execution.artifacts_produced == []

    def test_forge_job_progress_bounds(self):
        job = ForgeJob(
            processing_id="proc_1", status="processing", progress_percent=50,
            current_stage="D", created_at="2024-01-15T10:00:00Z",
        )
        assert job.idempotent_reuse is False
        with pytest.raises(ValidationError):
            ForgeJob(
                processing_id="proc_1", status="processing", progress_percent=101,
                current_stage="D", created_at="2024-01-15T10:00:00Z",
            )


class TestWorkflowDocuments:
    """Test bridge workflow documents."""

    def test_workflow_alias(self):
        assert Workflow is WorkflowDataSchema

    def test_step_confidence_range(self):
        with pytest.raises(ValidationError):
            WorkflowDataSchema(
                title="t", summary="s", duration_seconds=1, productivity_score=0.5, guide_markdown="",
                steps=[{"step": 1, "action": "a", "timestamp": "t", "confidence": 1.5, "context": "c"}],
            )


class TestVideoArtifacts:
    """Test flowchart, workflow guide and knowledge base contracts."""

    def test_flowchart_defaults(self):
        flowchart = FlowchartSchema(
            title="Invoice flow",
            nodes=[
                {"id": "n1", "type": "step", "title": "Open", "instructions": ["Click Sales", "Click Invoices"]},
                {"id": "n2", "type": "decision", "title": "Customer exists?", "question": "Found?"},
            ],
            edges=[{"id": "e1", "source": "n1", "target": "n2"}],
            layout={},
        )
        assert flowchart.schema_version == "1.0"
        assert flowchart.layout.persisted is False
        assert flowchart.layout.positions == {}

    def test_flowchart_rejects_unknown_node_type(self):
        with pytest.raises(ValidationError):
            FlowchartSchema(title="t", nodes=[{"id": "n1", "type": "loop", "title": "x"}], edges=[])

    def test_workflow_guide(self, workflow_guide):
        guide = VideoWorkflowGuideContentSchema(**workflow_guide)
        assert guide.quick_reference.key_commands == []
        assert WorkflowGuideContentSchema is VideoWorkflowGuideContentSchema

    def test_workflow_guide_step_numbers_start_at_one(self, workflow_guide):
        workflow_guide["step_by_step_guide"][0]["step_number"] = 0
        with pytest.raises(ValidationError):
            VideoWorkflowGuideContentSchema(**workflow_guide)

    def test_knowledge_base_migrates_legacy_relationship_keys(self, knowledge_base):
        kb = KnowledgeBaseContentSchema(**knowledge_base)
        relationship = kb.concept_relationships[0]
        assert relationship.from_item_id == "k2"
        assert relationship.to_item_id == "k1"
        dumped = relationship.model_dump()
        assert "from" not in dumped and "to" not in dumped

    def test_relationship_current_keys_win(self):
        relationship = ConceptRelationshipSchema(**{
            "from_item_id": "a", "to_item_id": "b", "from": "x", "to": "y",
            "relationship": "related", "description": "d",
        })
        assert (relationship.from_item_id, relationship.to_item_id) == ("a", "b")

    def test_relationship_requires_endpoints(self):
        with pytest.raises(ValidationError):
            ConceptRelationshipSchema(relationship="related", description="d")


class TestProjects:
    """Test project and context contracts."""

    def test_create_project_defaults(self):
        project = CreateProjectSchema(name="Onboarding")
        assert project.visibility == "private"

    @pytest.mark.parametrize("data", [
        {"name": ""},
        {"name": "x" * 101},
        {"name": "ok", "description": "d" * 501},
        {"name": "ok", "visibility": "public"},
    ])
    def test_create_project_limits(self, data):
        with pytest.raises(ValidationError):
            CreateProjectSchema(**data)

    def test_project_stats_default_to_zero(self):
        project = ProjectWithStatsSchema(
            id="p1", name="Onboarding", owner_id="u1", visibility="org:view",
            created_at="2024-01-15T10:00:00Z", updated_at="2024-01-15T10:00:00Z",
        )
        assert (project.session_count, project.workflow_count, project.teaching_count) == (0, 0, 0)

    def test_unassign_session(self):
        assert UpdateSessionProjectSchema(project_id=None).project_id is None
        with pytest.raises(ValidationError):
            UpdateSessionProjectSchema()

    def test_context_list_discriminates_on_kind(self):
        output = ContextListOutputSchema(
            contexts=[
                {"id": "s1", "kind": "session", "name": "Invoice", "visibility": "private",
                 "session_type": "workflow_recording", "project_id": None, "project_name": None},
                {"id": "p1", "kind": "project", "name": "Finance", "visibility": "org:edit",
                 "description": None, "session_count": 1, "workflow_count": 1, "teaching_count": 0},
            ],
            total_count=2, project_count=1, session_count=1,
        )
        assert isinstance(output.contexts[0], SessionContextSchema)
        assert isinstance(output.contexts[1], ProjectContextSchema)


class TestEditHistory:
    """Test edit history versions."""

    def test_cap(self):
        assert EDIT_HISTORY_CAP == 20

    def test_version(self):
        version = EditHistoryVersionSchema(
            timestamp="2024-01-15T10:00:00Z",
            source="mcp",
            action="modify",
            target_type="step",
            target_number=3,
            change_summary=["Reworded step 3"],
            content_snapshot={"task_summary": {"name": "Create invoice"}},
        )
        assert version.modified_by is None

    def test_unknown_source(self):
        with pytest.raises(ValidationError):
            EditHistoryVersionSchema(
                timestamp="t", source="cron", action="modify", change_summary=[], content_snapshot={}
            )

    def test_change_summary_defaults_to_empty(self):
        version = EditHistoryVersionSchema(
            timestamp="2024-01-15T10:00:00Z", source="admin_ui", action="modify", content_snapshot={}
        )
        assert version.change_summary == []


class TestServiceErrorEnvelope:
    """Test the service-to-service error envelope."""

    def test_retry_after_optional(self):
        envelope = ServiceErrorEnvelopeSchema(
            error_code="BRIDGE_DOWN", error_message="Bridge offline",
            correlation_id="corr_1", timestamp="2024-01-15T10:00:00Z",
        )
        assert envelope.retry_after is None

    def test_negative_retry_after_rejected(self):
        with pytest.raises(ValidationError):
            ServiceErrorEnvelopeSchema(
                error_code="FORGE_TIMEOUT", error_message="Timed out",
                correlation_id="corr_1", timestamp="2024-01-15T10:00:00Z", retry_after=-1,
            )
