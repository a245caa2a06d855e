"""
Idempotent DDL for the todolist tables.

``gen_random_uuid()`` is built into PostgreSQL 13 and later.
"""

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS tasks (
    id          UUID PRIMARY KEY DEFAULT gen_random_uuid(),
    value       TEXT NOT NULL,
    completed   BOOLEAN NOT NULL DEFAULT FALSE,
    due_date    TIMESTAMPTZ NULL,
    created_at  TIMESTAMPTZ NOT NULL DEFAULT now(),
    updated_at  TIMESTAMPTZ NOT NULL DEFAULT now(),
    deleted_at  TIMESTAMPTZ NULL
);

CREATE TABLE IF NOT EXISTS comments (
    id          UUID PRIMARY KEY DEFAULT gen_random_uuid(),
    task_id     UUID NOT NULL REFERENCES tasks (id),
    value       TEXT NOT NULL,
    created_at  TIMESTAMPTZ NOT NULL DEFAULT now(),
    deleted_at  TIMESTAMPTZ NULL
);

CREATE TABLE IF NOT EXISTS labels (
    id          UUID PRIMARY KEY DEFAULT gen_random_uuid(),
    task_id     UUID NOT NULL REFERENCES tasks (id),
    value       TEXT NOT NULL,
    created_at  TIMESTAMPTZ NOT NULL DEFAULT now(),
    deleted_at  TIMESTAMPTZ NULL
);

CREATE INDEX IF NOT EXISTS idx_tasks_created_at
    ON tasks (created_at) WHERE deleted_at IS NULL;

CREATE INDEX IF NOT EXISTS idx_comments_task_id
    ON comments (task_id) WHERE deleted_at IS NULL;

-- one live label per (task, value)
CREATE UNIQUE INDEX IF NOT EXISTS uq_labels_task_id_value
    ON labels (task_id, value) WHERE deleted_at IS NULL;
"""
