"""
Example Payloads
================
Known-good and known-bad payloads for documentation, smoke tests and
consumer test suites.
"""

VALID_EXAMPLES = {
    # Pairing & presence
    "pair_intent_response": {
        "pairing_token": "pair_abcd1234567890ef",
        "deep_link": "flingoos-bridge://pair?t=pair_abcd1234567890ef",
        "expires_at": "2024-01-15T10:30:00.000Z",
    },
    "pair_complete_request": {
        "pairing_token": "pair_abcd1234567890ef",
        "device_proof": "ed25519_signature_hex_encoded_64_chars_here_1234567890abcdef",
    },
    "device_record": {
        "fingerprint": "fp_device_abc123456789",
        "device_id": "dev_org123_device456",
        "org_id": "org_diligent4",
        "label": "MacBook Pro",
        "paired_by": "user_alice_123",
        "paired_at": "2024-01-15T09:00:00.000Z",
        "last_heartbeat_at": "2024-01-15T10:29:45.000Z",
        "expires_at": "2024-01-16T09:00:00.000Z",
        "available": True,
        "stale": False,
    },
    "user_device_link": {
        "user_id": "user_alice_123",
        "org_id": "org_diligent4",
        "fingerprint": "fp_device_abc123456789",
        "last_used_at": "2024-01-15T10:15:00.000Z",
        "expires_at": "2024-01-16T10:15:00.000Z",
    },
    "presence_intent_response": {
        "presence_nonce": "pres_xyz789012345abcd",
        "deep_link": "flingoos-bridge://approve?t=pres_xyz789012345abcd",
        "short_code": "1234",
        "expires_at": "2024-01-15T10:32:00.000Z",
    },
    "presence_complete_request": {
        "presence_nonce": "pres_xyz789012345abcd",
        "device_proof": "ed25519_signature_for_presence_proof_here_64_chars_1234abcd",
    },
    "presence_status_not_ready": {
        "ready": False,
        "poll_after_ms": 800,
        "now": "2024-01-15T10:31:30.000Z",
    },
    "presence_status_ready": {
        "ready": True,
        "presence_ticket": "ticket_ready_abc123456789",
        "expires_at": "2024-01-15T10:33:00.000Z",
        "poll_after_ms": 1000,
        "now": "2024-01-15T10:31:45.000Z",
    },
    "session_start_request": {
        "presence_ticket": "ticket_ready_abc123456789",
        "session_options": {
            "stages": ["A", "B", "C"],
            "media_processing": True,
        },
    },
    "error_envelope": {
        "code": "ticket_expired",
        "http": 400,
        "message": "Presence ticket has expired",
        "details": {
            "expired_at": "2024-01-15T10:30:00.000Z",
            "current_time": "2024-01-15T10:32:15.000Z",
        },
    },

    # Session manager & bridge
    "session_start_response": {
        "success": True,
        "session_id": "sess_20240115_103000",
        "status": "active",
        "message": "Recording started",
    },
    "bridge_command_request": {
        "command": "audio_start",
        "timestamp": 1705312200.0,
    },
    "session_internal_state": {
        "session_id": "sess_20240115_103000",
        "start_time": "2024-01-15T10:30:00.000Z",
        "stop_time": "2024-01-15T10:45:00.000Z",
        "status": "completed",
        "workflow_ready": True,
        "processing_id": "proc_abc123",
        "firestore_path": "organizations/org_diligent4/workflows/wf_789",
        "workflow_id": "wf_789",
        "processing_time_seconds": 42.5,
    },

    # Forge
    "forge_job_response": {
        "status": "completed",
        "session_id": "sess_20240115_103000",
        "processing_time_seconds": 42.5,
        "firestore_path": "organizations/org_diligent4/workflows/wf_789",
        "workflow_id": "wf_789",
        "message": "Processing completed",
        "timestamp": "2024-01-15T10:46:00.000Z",
    },

    # Translations
    "session_content_doc": {
        "content": {"task_summary": {"name": "Create invoice"}},
        "content_metadata": {"output_language": "auto", "detected_language": "en"},
        "contentRevision": 3,
        "contentFingerprint": "sha256:4f2a",
        "translations": {
            "he": {
                "translatedContent": {"task_summary": {"name": "יצירת חשבונית"}},
                "translatedAt": "2024-01-15T11:00:00.000Z",
                "sourceRevision": 3,
                "sourceFingerprint": "sha256:4f2a",
                "status": "ready",
            },
        },
        "updated_at": "2024-01-15T11:00:00.000Z",
    },
}

# Values that must fail validation
INVALID_EXAMPLES = {
    "invalid_token": "short",
    "invalid_timestamp": "2024-01-15 10:30:00",
    "invalid_short_code": "12345",
    "invalid_deep_link": "https://example.com/pair",
    "invalid_http_status": 200,
    # Must never show up in log output
    "presence_ticket_in_logs": "ticket_should_not_appear_in_logs_123456789",
}
