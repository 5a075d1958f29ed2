"""Reference prompt templates for knowledge-base augmentation."""

QUESTION_PLACEHOLDER = "{question}"
REFERENCES_PLACEHOLDER = "{references}"

REFERENCE_PROMPT = """Please answer the question based on the reference materials

## Citation Rules:
- Please cite the context at the end of sentences when appropriate.
- Please use the format of citation number [number] to reference the context in corresponding parts of your answer.
- If a sentence comes from multiple contexts, please list all relevant citation numbers, e.g., [1][2]. Remember not to group citations at the end but list them in the corresponding parts of your answer.

## My question is:

{question}

## Reference Materials:

{references}

Please respond in the same language as the user's question.
"""


def missing_placeholders(template: str) -> list[str]:
    """Return the placeholders a reference template does not contain."""
    return [
        placeholder
        for placeholder in (QUESTION_PLACEHOLDER, REFERENCES_PLACEHOLDER)
        if placeholder not in template
    ]


def render_reference_prompt(template: str, question: str, references: str) -> str:
    """Fill a reference template.

    Only the first occurrence of each placeholder is replaced; any later
    ``{question}`` or ``{references}`` stays literal. The question is
    substituted first, so a ``{references}`` typed by the user inside the
    question is the occurrence that receives the references.
    """
    result = template.replace(QUESTION_PLACEHOLDER, question, 1)
    return result.replace(REFERENCES_PLACEHOLDER, references, 1)
