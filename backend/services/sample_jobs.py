"""Demo job descriptions served by GET /sample-job-descriptions."""

from models.responses import SampleJob

SAMPLE_JOBS: dict[str, SampleJob] = {
    "data-scientist": SampleJob(
        title="Data Scientist",
        company="Tech Corp",
        description="""We are seeking a Data Scientist to join our growing analytics team.

Key Responsibilities:
• Develop and implement machine learning models to solve complex business problems
• Analyze large datasets using Python, SQL, and statistical methods
• Create data visualizations and dashboards using Tableau or Power BI
• Collaborate with cross-functional teams to deliver data-driven insights
• Deploy models to production environments using cloud platforms (AWS/Azure)

Required Qualifications:
• Master's degree in Data Science, Statistics, Computer Science, or related field
• 3+ years of experience in data science or analytics role
• Strong proficiency in Python (pandas, scikit-learn, TensorFlow)
• Experience with SQL and database management
• Knowledge of machine learning algorithms and statistical modeling
• Excellent communication and presentation skills

Preferred Qualifications:
• PhD in quantitative field
• Experience with deep learning frameworks (PyTorch, Keras)
• Knowledge of big data technologies (Spark, Hadoop)
• Experience with A/B testing and experimental design
• Publications or contributions to open-source projects""",
    ),
    "software-engineer": SampleJob(
        title="Senior Software Engineer",
        company="Innovation Labs",
        description="""Join our engineering team as a Senior Software Engineer working on cutting-edge web applications.

Responsibilities:
• Design and develop scalable web applications using modern JavaScript frameworks
• Write clean, maintainable code following best practices and design patterns
• Collaborate with product managers and designers on feature development
• Conduct code reviews and mentor junior developers
• Optimize application performance and user experience
• Implement automated testing and CI/CD pipelines

Requirements:
• Bachelor's degree in Computer Science or equivalent experience
• 5+ years of professional software development experience
• Expert knowledge of JavaScript, React, Node.js
• Experience with RESTful APIs and microservices architecture
• Proficiency with Git, Docker, and cloud platforms (AWS/GCP)
• Strong problem-solving and debugging skills
• Excellent teamwork and communication abilities

Nice to Have:
• TypeScript experience
• Knowledge of GraphQL
• Experience with Kubernetes
• Contributions to open-source projects
• Agile/Scrum methodology experience""",
    ),
    "marketing-manager": SampleJob(
        title="Digital Marketing Manager",
        company="Brand Solutions Inc",
        description="""We're looking for a creative and data-driven Digital Marketing Manager to lead our marketing initiatives.

Key Duties:
• Develop and execute comprehensive digital marketing strategies
• Manage social media campaigns across multiple platforms
• Analyze campaign performance using Google Analytics and marketing automation tools
• Create engaging content for email marketing, blogs, and social channels
• Manage SEO/SEM strategies to increase organic and paid traffic
• Collaborate with design and content teams on creative assets
• Monitor industry trends and competitor activities
• Report on KPIs and ROI to stakeholders

Qualifications:
• Bachelor's degree in Marketing, Business, or related field
• 4+ years of digital marketing experience
• Proven track record of successful campaign management
• Expertise in Google Ads, Facebook Ads, LinkedIn Marketing
• Strong analytical skills and experience with marketing analytics tools
• Excellent written and verbal communication skills
• Project management experience
• Budget management experience

Preferred:
• MBA or marketing certification
• Experience with marketing automation platforms (HubSpot, Marketo)
• Graphic design skills (Adobe Creative Suite)
• Video content creation experience""",
    ),
}
