"""Prompt construction for template generation."""

from notionify.models import PROPERTY_TYPES, TemplateType

SYSTEM_PROMPT = f"""You are an expert Notion template architect with deep knowledge of productivity systems, project management, and organizational structures. Your task is to create comprehensive, practical Notion page templates that users can immediately implement.

CRITICAL REQUIREMENTS:
1. Output ONLY valid JSON - no explanations, no markdown, no additional text
2. Create templates that are immediately actionable and practical
3. Consider real-world use cases and workflows
4. Include relevant properties and sections that enhance productivity

JSON STRUCTURE (STRICT FORMAT):
{{
  "title": "Clear, descriptive template name",
  "sections": [
    {{
      "name": "Section name",
      "description": "Detailed description of what this section contains and how to use it"
    }}
  ],
  "properties": [
    {{
      "name": "Property name",
      "type": "Notion property type ({', '.join(PROPERTY_TYPES)})",
      "description": "Clear explanation of this property's purpose and usage"
    }}
  ],
  "notes": "Optional implementation tips, best practices, or additional context"
}}

GUIDELINES:
- Use appropriate Notion property types
- Include 3-8 sections that logically organize the content
- Include 5-15 properties that capture essential data
- Make descriptions actionable and specific
- Consider different user skill levels
- Focus on templates that solve real problems

EXAMPLES OF GOOD PROPERTY TYPES:
- "status" for task/project status
- "select" for categories with predefined options
- "multi-select" for tags
- "date" for deadlines, start dates
- "number" for priorities, scores, quantities
- "checkbox" for completion status
- "url" for links to external resources
- "relation" for connecting to other databases

Remember: Output ONLY the JSON object, nothing else."""

TEMPLATE_TYPE_GUIDANCE: dict[TemplateType, str] = {
    "project-management": (
        "Focus on task tracking, deadlines, team collaboration, and progress monitoring. "
        "Include status tracking, priority levels, and resource allocation."
    ),
    "personal-productivity": (
        "Emphasize goal setting, habit tracking, time management, and personal organization. "
        "Include daily/weekly/monthly views."
    ),
    "content-creation": (
        "Include content planning, publishing schedules, idea capture, and performance tracking. "
        "Consider different content types and platforms."
    ),
    "learning-education": (
        "Focus on course tracking, note-taking, progress monitoring, and knowledge organization. "
        "Include study schedules and resource management."
    ),
    "finance-budgeting": (
        "Include expense tracking, budget categories, financial goals, and investment monitoring. "
        "Consider different account types and currencies."
    ),
    "health-fitness": (
        "Focus on workout tracking, nutrition logging, health metrics, and goal setting. "
        "Include progress visualization and habit formation."
    ),
    "business-entrepreneur": (
        "Include customer management, sales tracking, business metrics, and growth planning. "
        "Consider different business models and stages."
    ),
    "event-planning": (
        "Focus on timeline management, vendor coordination, guest management, and budget tracking. "
        "Include checklist and communication tools."
    ),
    "research-knowledge": (
        "Emphasize source tracking, note organization, citation management, and knowledge synthesis. "
        "Include different research methodologies."
    ),
    "creative-writing": (
        "Include idea capture, character development, plot tracking, and publishing workflow. "
        "Consider different writing stages and formats."
    ),
}


def user_prompt(purpose: str) -> str:
    """Wrap the user's description in the generation instructions."""

    return f"""Create a comprehensive Notion template for: "{purpose}"

Requirements:
- Make it practical and immediately usable
- Include all necessary sections and properties
- Consider different use cases and workflows
- Provide clear, actionable descriptions
- Use appropriate Notion property types

Output only the JSON template structure."""


def build_prompt(purpose: str, template_type: TemplateType | None = None) -> str:
    """Return the full text sent to the inference endpoint."""

    user_block = user_prompt(purpose)
    if template_type:
        guidance = TEMPLATE_TYPE_GUIDANCE[template_type]
        user_block = f"{user_block}\n\nTemplate Type: {template_type}\n{guidance}"
    return f"{SYSTEM_PROMPT}\n\n{user_block}"
