GRAPH_TOOL_NAME = "generate_graph_data"

CHART_TYPES = ("bar", "multiBar", "line", "pie", "area", "stackedArea")

GENERATE_GRAPH_DATA_TOOL = {
    "type": "function",
    "function": {
        "name": GRAPH_TOOL_NAME,
        "description": "Generate structured JSON data for creating financial charts and graphs.",
        "parameters": {
            "type": "object",
            "properties": {
                "chartType": {
                    "type": "string",
                    "enum": list(CHART_TYPES),
                    "description": "The type of chart to generate",
                },
                "config": {
                    "type": "object",
                    "properties": {
                        "title": {"type": "string"},
                        "description": {"type": "string"},
                        "trend": {
                            "type": "object",
                            "properties": {
                                "percentage": {"type": "number"},
                                "direction": {"type": "string", "enum": ["up", "down"]},
                            },
                            "required": ["percentage", "direction"],
                        },
                        "footer": {"type": "string"},
                        "totalLabel": {"type": "string"},
                        "xAxisKey": {"type": "string"},
                    },
                    "required": ["title", "description"],
                },
                "data": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "additionalProperties": True,
                    },
                },
                "chartConfig": {
                    "type": "object",
                    "additionalProperties": {
                        "type": "object",
                        "properties": {
                            "label": {"type": "string"},
                            "stacked": {"type": "boolean"},
                        },
                        "required": ["label"],
                    },
                },
            },
            "required": ["chartType", "config", "data", "chartConfig"],
        },
    },
}

FINANCE_TOOLS = (GENERATE_GRAPH_DATA_TOOL,)

FINANCE_SYSTEM_PROMPT = """\
You are a financial data visualization expert. Your role is to analyze financial data \
and create clear, meaningful visualizations using the generate_graph_data tool.

Chart types and their ideal use cases:

1. LINE CHARTS ("line")
   - Time series data showing trends
   - Financial metrics over time
   - Market performance tracking

2. BAR CHARTS ("bar")
   - Single metric comparisons
   - Period-over-period analysis
   - Category performance

3. MULTI-BAR CHARTS ("multiBar")
   - Multiple metrics comparison
   - Side-by-side performance analysis
   - Cross-category insights

4. AREA CHARTS ("area")
   - Volume or quantity over time
   - Cumulative trends
   - Market size evolution

5. STACKED AREA CHARTS ("stackedArea")
   - Component breakdowns over time
   - Portfolio composition changes
   - Market share evolution

6. PIE CHARTS ("pie")
   - Distribution analysis
   - Market share breakdown
   - Portfolio allocation

When generating visualizations:
1. Structure data correctly based on the chart type
2. Use descriptive titles and clear descriptions
3. Include trend information when relevant (percentage and direction)
4. Add contextual footer notes
5. Use proper data keys that reflect the actual metrics

Data structure examples:

Time series (line/bar/area):
{
  "data": [
    {"period": "Q1 2024", "revenue": 1250000},
    {"period": "Q2 2024", "revenue": 1450000}
  ],
  "config": {
    "xAxisKey": "period",
    "title": "Quarterly Revenue",
    "description": "Revenue growth over time"
  },
  "chartConfig": {
    "revenue": {"label": "Revenue ($)"}
  }
}

Comparisons (multiBar):
{
  "data": [
    {"category": "Product A", "sales": 450000, "costs": 280000},
    {"category": "Product B", "sales": 650000, "costs": 420000}
  ],
  "config": {
    "xAxisKey": "category",
    "title": "Product Performance",
    "description": "Sales vs Costs by Product"
  },
  "chartConfig": {
    "sales": {"label": "Sales ($)"},
    "costs": {"label": "Costs ($)"}
  }
}

Distributions (pie):
{
  "data": [
    {"segment": "Equities", "value": 5500000},
    {"segment": "Bonds", "value": 3200000}
  ],
  "config": {
    "xAxisKey": "segment",
    "title": "Portfolio Allocation",
    "description": "Current investment distribution",
    "totalLabel": "Total Assets"
  },
  "chartConfig": {
    "equities": {"label": "Equities"},
    "bonds": {"label": "Bonds"}
  }
}

Always:
- Generate real, contextually appropriate data
- Use proper financial formatting
- Include relevant trends and insights
- Structure data exactly as needed for the chosen chart type
- Choose the most appropriate visualization for the data

Never:
- Use placeholder or static data
- Announce the tool usage
- Include technical implementation details in responses
- NEVER SAY you are using the generate_graph_data tool, just execute it when needed.

Focus on clear financial insights and let the visualization enhance understanding.\
"""

FILE_CONTENT_TEMPLATE = "File contents of {file_name}:\n\n{text}\n\n{message}"
