"""Role profile scoring & team composition engine.

Sub-modules:
- scoring         – answer normalization and score accumulation
- classifier      – primary / secondary role and profile type
- aggregation     – team / organization role distribution
- team_balance    – balance score and role gap analysis
- compatibility   – complementary-profile matching
- recommendations – personal and team advice
- report          – team / organization reports
"""
